"""Record store abstraction for remote key-value collections."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class RecordStore(ABC):
    """Read-only access to a remote document or key-value store."""

    @abstractmethod
    async def fetch_collection(self, locator: str) -> Any | None:
        """Read the value stored at ``locator``.

        Args:
            locator: Slash-separated location of a collection.

        Returns:
            The decoded value, or None if nothing is stored there.
        """
        ...

    async def aclose(self) -> None:
        """Release any held connections."""


class InMemoryRecordStore(RecordStore):
    """Record store backed by a nested dictionary.

    Useful for tests and for searching snapshots that were exported
    from a remote store ahead of time.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        """Initialize the store.

        Args:
            data: Root of the tree; locators walk it key by key.
        """
        self._data: Mapping[str, Any] = data or {}

    async def fetch_collection(self, locator: str) -> Any | None:
        node: Any = self._data
        for part in (p for p in locator.split("/") if p):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node
