"""Item providers: the only components that read from the outside world.

Usage:
    from searchmind.providers import FileContentsProvider
    from searchmind.models import SearchOptions

    provider = FileContentsProvider()
    items = await provider.fetch_items(SearchOptions(search_paths=["docs"]))
"""

from searchmind.providers.base import ItemProvider
from searchmind.providers.files import FileContentsProvider, FileNameProvider
from searchmind.providers.metadata import create_metadata, flatten_record
from searchmind.providers.records import RemoteRecordProvider

__all__ = [
    "ItemProvider",
    "FileNameProvider",
    "FileContentsProvider",
    "RemoteRecordProvider",
    "create_metadata",
    "flatten_record",
]
