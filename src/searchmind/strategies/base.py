"""Base class shared by the matching strategies."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from searchmind.models import SearchableItem, SearchOptions, SearchResult
from searchmind.providers.base import ItemProvider


def rank(results: Iterable[SearchResult], max_results: int) -> list[SearchResult]:
    """Sort results by descending relevance and truncate.

    The sort is stable, so equal scores keep their encounter order.
    """
    ordered = sorted(results, key=lambda r: r.relevance_score, reverse=True)
    return ordered[:max_results]


class SearchStrategy(ABC):
    """A matching algorithm wired to the provider it reads items from.

    Strategies hold no per-search state and can serve concurrent searches.
    """

    #: Name used in logs and reprs.
    name: str = "strategy"

    #: Ask the provider to drop members that cannot be decoded as text.
    skips_undecodable: bool = False

    def __init__(self, provider: ItemProvider) -> None:
        self.provider = provider

    async def search(self, term: str, options: SearchOptions) -> list[SearchResult]:
        """Fetch items from the provider and score them against ``term``.

        Args:
            term: The search term as given by the caller.
            options: Search options.

        Returns:
            Results sorted by descending relevance.
        """
        items = await self.provider.fetch_items(
            options, skip_undecodable=self.skips_undecodable
        )
        return await self.score(term, items, options)

    @abstractmethod
    async def score(
        self,
        term: str,
        items: list[SearchableItem],
        options: SearchOptions,
    ) -> list[SearchResult]:
        """Score items against a term.

        Args:
            term: The search term as given by the caller.
            items: Items fetched for this search.
            options: Search options.

        Returns:
            Matching results sorted by descending relevance, at most
            ``options.max_results`` long.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider={self.provider!r})"
