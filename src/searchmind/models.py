"""Core value types shared by providers, strategies and the engine.

Every type here is immutable. Searches running concurrently receive the
same option and item objects without copying them.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class SearchType(str, Enum):
    """Kind of source a search runs against.

    The same values tag each ``SearchResult`` with where it came from.
    """

    FILE = "file"
    FILE_CONTENTS = "fileContents"
    DATABASE = "database"


@dataclass(frozen=True)
class SearchableItem:
    """A normalized record produced by a provider.

    Attributes:
        id: Opaque unique identifier.
        data: Searchable text payload (filename, file body or record text).
        path: Locator, unique within its source.
        metadata: Source-kind specific string attributes.
    """

    id: str
    data: str
    path: str
    metadata: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchResult:
    """A scored match returned by a strategy."""

    match_type: SearchType
    path: str
    relevance_score: float
    matched_terms: tuple[str, ...]
    context: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "match_type": self.match_type.value,
            "path": self.path,
            "relevance_score": self.relevance_score,
            "matched_terms": list(self.matched_terms),
            "context": self.context,
        }


def _freeze(values: Iterable[str] | None) -> tuple[str, ...] | None:
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class SearchOptions:
    """Configuration bundle for a single search.

    Attributes:
        case_sensitive: Compare without folding case.
        fuzzy_matching: Select the edit-distance strategy.
        pattern_match: Select the occurrence-counting strategy.
        semantic: Select the embedding strategy.
        max_results: Upper bound on returned results, at least 1.
        search_paths: Scope locators (paths or collection locators).
        file_extensions: Allow-list of extensions, without the dot.
        timeout: Seconds before the search is abandoned, None for unbounded.
        api_key: Credential for the embedding service.
    """

    case_sensitive: bool = False
    fuzzy_matching: bool = True
    pattern_match: bool = False
    semantic: bool = False
    max_results: int = 100
    search_paths: tuple[str, ...] | None = None
    file_extensions: tuple[str, ...] | None = None
    timeout: float | None = None
    api_key: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "max_results", max(1, int(self.max_results)))

        paths = _freeze(self.search_paths)
        if paths is not None:
            paths = tuple(str(p) for p in paths)
        object.__setattr__(self, "search_paths", paths)

        extensions = _freeze(self.file_extensions)
        if extensions is not None:
            extensions = tuple(ext.lstrip(".") for ext in extensions)
        object.__setattr__(self, "file_extensions", extensions)

    def replace(self, **changes: Any) -> "SearchOptions":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def normalize(self, text: str) -> str:
        """Fold case unless the search is case sensitive."""
        return text if self.case_sensitive else text.lower()
