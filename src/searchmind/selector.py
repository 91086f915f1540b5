"""Algorithm selection.

The decision is a fixed precedence over the option flags, identical for
every source kind: semantic, then pattern, then fuzzy, then exact.
"""

from searchmind.embeddings.base import Embedder
from searchmind.exceptions import InternalError
from searchmind.models import SearchOptions, SearchType
from searchmind.providers.base import ItemProvider
from searchmind.providers.files import FileContentsProvider, FileNameProvider
from searchmind.providers.records import RemoteRecordProvider
from searchmind.stores.base import RecordStore
from searchmind.strategies.base import SearchStrategy
from searchmind.strategies.exact import ExactMatchStrategy
from searchmind.strategies.fuzzy import FuzzyMatchStrategy
from searchmind.strategies.pattern import PatternMatchStrategy
from searchmind.strategies.semantic import SemanticMatchStrategy


def strategy_for(options: SearchOptions) -> type[SearchStrategy]:
    """Pick the strategy class for a set of option flags."""
    if options.semantic:
        return SemanticMatchStrategy
    if options.pattern_match:
        return PatternMatchStrategy
    if options.fuzzy_matching:
        return FuzzyMatchStrategy
    return ExactMatchStrategy


class AlgorithmSelector:
    """Wires the chosen strategy to the provider for a source kind.

    Selection performs no I/O; it only constructs objects.
    """

    def __init__(
        self,
        embedder: Embedder | None = None,
        record_store: RecordStore | None = None,
    ) -> None:
        """Initialize the selector.

        Args:
            embedder: Embedding backend handed to semantic strategies.
            record_store: Store backing database searches.
        """
        self.embedder = embedder
        self.record_store = record_store

    def provider_for(self, search_type: SearchType) -> ItemProvider:
        """Build the provider for a source kind.

        Raises:
            InternalError: If a database search has no record store.
        """
        if search_type == SearchType.FILE:
            return FileNameProvider()
        if search_type == SearchType.FILE_CONTENTS:
            return FileContentsProvider()
        if self.record_store is None:
            raise InternalError("No record store configured for database search")
        return RemoteRecordProvider(self.record_store)

    def select(self, search_type: SearchType, options: SearchOptions) -> SearchStrategy:
        """Select the strategy for a search.

        Args:
            search_type: Source kind to search.
            options: Search options carrying the selection flags.

        Returns:
            A strategy bound to the matching provider.
        """
        provider = self.provider_for(SearchType(search_type))
        strategy_cls = strategy_for(options)
        if strategy_cls is SemanticMatchStrategy:
            return SemanticMatchStrategy(provider, self.embedder)
        return strategy_cls(provider)


def select_strategy(
    search_type: SearchType,
    options: SearchOptions,
    *,
    embedder: Embedder | None = None,
    record_store: RecordStore | None = None,
) -> SearchStrategy:
    """Select a strategy without keeping a selector around."""
    return AlgorithmSelector(embedder, record_store).select(search_type, options)
