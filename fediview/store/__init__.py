"""Store implementations."""

from fediview.store.base import Store
from fediview.store.memory import MemoryStore
from fediview.store.sqlite_store import SQLiteStore
from fediview.store.snapshot import Edge, Snapshot, load_snapshot
from fediview.store.factory import create_store

__all__ = [
    "Store",
    "MemoryStore",
    "SQLiteStore",
    "Edge",
    "Snapshot",
    "load_snapshot",
    "create_store",
]
