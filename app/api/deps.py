"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Header, Query

from app.config import get_settings
from app.db.session import SessionLocal
from app.storage import DEMO_SEED_PATH, MemoryStorage, SqlStorage, Storage, load_seed_file

logger = logging.getLogger(__name__)

__all__ = [
    "get_condominium_id",
    "get_memory_storage",
    "get_storage",
]


@lru_cache(maxsize=1)
def get_memory_storage() -> MemoryStorage:
    """Process-wide in-memory store used when DATA_BACKEND=memory.

    Seeded once from MEMORY_SEED_PATH, or from the bundled demo condominium
    when the setting is empty.
    """
    seed_path = get_settings().memory_seed_path or DEMO_SEED_PATH
    storage = MemoryStorage(seed=load_seed_file(seed_path))
    logger.info(
        "Memory storage seeded from %s (%d rows)", seed_path, storage.row_count()
    )
    return storage


def get_storage() -> Storage:
    """Return the configured read backend (SQL by default)."""
    if get_settings().uses_memory_backend:
        return get_memory_storage()
    return SqlStorage(SessionLocal)


def get_condominium_id(
    condominium_id: str | None = Query(
        None,
        description="Tenant to evaluate. Overrides the X-Condominium-Id header.",
    ),
    x_condominium_id: str | None = Header(None),
) -> str | None:
    """Resolve the tenant from query string or X-Condominium-Id header.

    Blank values are treated as absent. None means rows of every tenant.
    """
    for candidate in (condominium_id, x_condominium_id):
        if candidate and candidate.strip():
            return candidate.strip()
    return None
