"""Store selection from configuration."""

from pathlib import Path

from fediview.config import InstanceConfig, StoreBackend
from fediview.store.base import Store
from fediview.store.memory import MemoryStore
from fediview.store.sqlite_store import SQLiteStore


def create_store(config: InstanceConfig, db_path: str | Path | None = None) -> Store:
    """
    Build the store named by config.store_backend.

    Args:
        config: InstanceConfig supplying backend, host and SQLite path
        db_path: Overrides config.sqlite_path for the SQLite backend

    Returns:
        Unopened store, use it as an async context manager
    """
    if config.store_backend == StoreBackend.MEMORY:
        return MemoryStore(config.host)
    return SQLiteStore(str(db_path or config.sqlite_path), host=config.host)
