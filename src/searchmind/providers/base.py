"""Base provider class for turning a search scope into items."""

from abc import ABC, abstractmethod

from searchmind.exceptions import SearchPathUnavailableError
from searchmind.models import SearchableItem, SearchOptions, SearchType


class ItemProvider(ABC):
    """Abstract base class for item providers.

    A provider is the only component that touches the outside world.
    Instances hold no per-search state and may be shared between
    concurrent searches.
    """

    #: Source kind of the items this provider produces.
    search_type: SearchType

    #: Whether ``options.search_paths`` must be given explicitly.
    requires_search_paths: bool = True

    @abstractmethod
    async def fetch_items(
        self,
        options: SearchOptions,
        *,
        skip_undecodable: bool = False,
    ) -> list[SearchableItem]:
        """Fetch the items covered by ``options.search_paths``.

        Args:
            options: Search options carrying the scope and filters.
            skip_undecodable: Drop members whose payload is not text
                instead of failing.

        Returns:
            Freshly created items.

        Raises:
            SearchPathUnavailableError: If a required scope is missing.
            InvalidSearchPathError: If a scope entry does not resolve.
            FileAccessDeniedError: If a scope member cannot be read.
        """
        ...

    def scope(self, options: SearchOptions) -> tuple[str, ...] | None:
        """Return the scope locators, enforcing ``requires_search_paths``."""
        if not options.search_paths and self.requires_search_paths:
            raise SearchPathUnavailableError()
        return options.search_paths

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(search_type={self.search_type.value})"
