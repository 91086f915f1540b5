"""Public entry points.

``SearchMind`` validates caller input and fans multi-term searches out
to the engine. The module-level ``search`` and ``multi_search`` helpers
use a default instance with no embedder or record store.
"""

import asyncio

from searchmind.config.schema import SearchMindConfig
from searchmind.embeddings.base import Embedder
from searchmind.embeddings.registry import EmbedderRegistry
from searchmind.engine import SearchEngine
from searchmind.exceptions import EmptySearchTermError
from searchmind.models import SearchOptions, SearchResult, SearchType
from searchmind.stores.base import RecordStore
from searchmind.stores.rest import RestRecordStore


class SearchMind:
    """Main entry point for searching files, file contents and records.

    Usage:
        mind = SearchMind()
        results = await mind.search("model", options=SearchOptions(search_paths=["src"]))
        by_term = await mind.multi_search(["model", "view"])
    """

    def __init__(
        self,
        engine: SearchEngine | None = None,
        *,
        embedder: Embedder | None = None,
        record_store: RecordStore | None = None,
    ) -> None:
        """Initialize SearchMind.

        Args:
            engine: Pre-built engine; overrides the collaborators below.
            embedder: Embedding backend for semantic searches.
            record_store: Store backing database searches.
        """
        self.engine = engine or SearchEngine(embedder=embedder, record_store=record_store)
        self._embedder = embedder
        self._record_store = record_store

    @classmethod
    def from_config(cls, config: SearchMindConfig) -> "SearchMind":
        """Build an instance whose collaborators come from configuration.

        Args:
            config: Loaded configuration.

        Returns:
            A configured SearchMind.
        """
        embedder = EmbedderRegistry.get(
            config.embedding.provider,
            model=config.embedding.model,
            base_url=config.embedding.base_url,
            timeout=config.embedding.timeout,
        )

        record_store: RecordStore | None = None
        if config.database.base_url:
            record_store = RestRecordStore(
                base_url=config.database.base_url,
                auth_token=config.database.auth_token,
                timeout=config.database.timeout,
            )

        return cls(embedder=embedder, record_store=record_store)

    async def search(
        self,
        term: str,
        search_type: SearchType = SearchType.FILE,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        """Search for a single term.

        Args:
            term: Search term; must not be empty.
            search_type: Source kind to search.
            options: Search options; defaults when None.

        Returns:
            Results sorted by descending relevance.

        Raises:
            EmptySearchTermError: If ``term`` is empty.
            SearchMindError: Any failure from the engine.
        """
        if not term:
            raise EmptySearchTermError()
        return await self.engine.search(term, search_type, options or SearchOptions())

    async def multi_search(
        self,
        terms: list[str],
        search_type: SearchType = SearchType.FILE,
        options: SearchOptions | None = None,
    ) -> dict[str, list[SearchResult]]:
        """Search several terms concurrently.

        All searches share one task group. The first failure cancels the
        searches still running and is re-raised; no partial map is
        returned.

        Args:
            terms: Terms to search; duplicates are searched once.
            search_type: Source kind to search.
            options: Search options shared by every term.

        Returns:
            Mapping of each term to its results.

        Raises:
            EmptySearchTermError: If any term is empty.
            SearchMindError: The first failure observed.
        """
        if not terms:
            return {}
        if any(not term for term in terms):
            raise EmptySearchTermError()

        options = options or SearchOptions()
        unique_terms = list(dict.fromkeys(terms))

        try:
            async with asyncio.TaskGroup() as group:
                tasks = {
                    term: group.create_task(
                        self.engine.search(term, search_type, options),
                        name=f"search:{term}",
                    )
                    for term in unique_terms
                }
        except BaseExceptionGroup as eg:
            raise eg.exceptions[0] from None

        return {term: task.result() for term, task in tasks.items()}

    async def aclose(self) -> None:
        """Release collaborator resources."""
        if self._record_store is not None:
            await self._record_store.aclose()
        if self._embedder is not None:
            await self._embedder.aclose()


_default: SearchMind | None = None


def _get_default() -> SearchMind:
    global _default
    if _default is None:
        _default = SearchMind()
    return _default


async def search(
    term: str,
    search_type: SearchType = SearchType.FILE,
    options: SearchOptions | None = None,
) -> list[SearchResult]:
    """Search with the default instance. See ``SearchMind.search``."""
    return await _get_default().search(term, search_type, options)


async def multi_search(
    terms: list[str],
    search_type: SearchType = SearchType.FILE,
    options: SearchOptions | None = None,
) -> dict[str, list[SearchResult]]:
    """Search several terms with the default instance."""
    return await _get_default().multi_search(terms, search_type, options)
