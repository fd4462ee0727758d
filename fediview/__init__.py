"""fediview - entity to API view conversion for a federated microblogging server."""

from fediview.config import InstanceConfig
from fediview.core.batch import BatchResult
from fediview.core.converter import Converter
from fediview.core.exporter import save_json, to_dict, to_json
from fediview.exceptions import (
    CombinedError,
    ConversionError,
    FediviewError,
    NotFoundError,
    StoreError,
)
from fediview.store import MemoryStore, SQLiteStore, Store

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "Converter",
    "InstanceConfig",
    "BatchResult",
    # Stores
    "Store",
    "MemoryStore",
    "SQLiteStore",
    # Errors
    "FediviewError",
    "NotFoundError",
    "StoreError",
    "ConversionError",
    "CombinedError",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "__version__",
]
