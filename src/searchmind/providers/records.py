"""Remote record provider.

Each scope locator names a collection in a ``RecordStore``. Every top-level
entry of the collection whose value is itself a record becomes one item,
with the record flattened to text.
"""

from collections.abc import Mapping

from searchmind.exceptions import InvalidSearchPathError, InvalidSnapshotFormatError
from searchmind.models import SearchableItem, SearchOptions, SearchType
from searchmind.providers.base import ItemProvider
from searchmind.providers.metadata import create_metadata, flatten_record
from searchmind.stores.base import RecordStore
from searchmind.utils.logging import get_logger

logger = get_logger(__name__)


class RemoteRecordProvider(ItemProvider):
    """Provides one item per record of the scoped collections."""

    search_type = SearchType.DATABASE
    requires_search_paths = True

    def __init__(self, store: RecordStore) -> None:
        """Initialize the provider.

        Args:
            store: Store the collections are read from.
        """
        self.store = store

    async def fetch_items(
        self,
        options: SearchOptions,
        *,
        skip_undecodable: bool = False,
    ) -> list[SearchableItem]:
        items: list[SearchableItem] = []

        for locator in self.scope(options) or ():
            snapshot = await self.store.fetch_collection(locator)
            if snapshot is None:
                raise InvalidSearchPathError(locator)
            if not isinstance(snapshot, Mapping):
                raise InvalidSnapshotFormatError(
                    f"Expected a keyed collection at '{locator}', "
                    f"got {type(snapshot).__name__}"
                )

            collection = locator.strip("/")
            for key in sorted(snapshot):
                record = snapshot[key]
                if not isinstance(record, Mapping):
                    continue

                data = flatten_record(record)
                if not data:
                    logger.debug("Skipping empty record %s/%s", collection, key)
                    continue

                path = f"{collection}/{key}"
                items.append(
                    SearchableItem(
                        id=str(key),
                        data=data,
                        path=path,
                        metadata=create_metadata(data, path, self.search_type),
                    )
                )

        return items
