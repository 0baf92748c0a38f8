"""Read-only data access for the executive dashboard (SQL or in-memory)."""

from app.storage.base import (
    ENTITY_NAMES,
    DataFetchError,
    Storage,
    row_value,
)
from app.storage.memory_storage import DEMO_SEED_PATH, MemoryStorage, load_seed_file
from app.storage.sql_storage import SqlStorage

__all__ = [
    "DEMO_SEED_PATH",
    "ENTITY_NAMES",
    "DataFetchError",
    "MemoryStorage",
    "SqlStorage",
    "Storage",
    "load_seed_file",
    "row_value",
]
