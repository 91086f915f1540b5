"""Remote record stores used by the database provider."""

from searchmind.stores.base import InMemoryRecordStore, RecordStore
from searchmind.stores.rest import RestRecordStore

__all__ = ["RecordStore", "InMemoryRecordStore", "RestRecordStore"]
