"""searchmind: file-name, file-content and record search.

Usage:
    from searchmind import SearchMind, SearchOptions, SearchType

    mind = SearchMind()
    results = await mind.search(
        "config",
        SearchType.FILE_CONTENTS,
        SearchOptions(search_paths=["./src"], pattern_match=True),
    )
"""

from searchmind.api import SearchMind, multi_search, search
from searchmind.exceptions import SearchMindError
from searchmind.models import SearchableItem, SearchOptions, SearchResult, SearchType

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SearchMind",
    "search",
    "multi_search",
    "SearchMindError",
    "SearchableItem",
    "SearchOptions",
    "SearchResult",
    "SearchType",
]
