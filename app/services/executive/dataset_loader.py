"""Fan-out loader: fetch every entity type for one tenant into a dataset.

Fetches run concurrently in the threadpool; the first failure aborts the
whole load with DataFetchError. No retries, no partial datasets.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from starlette.concurrency import run_in_threadpool

from app.storage.base import (
    ENTITY_ANNOUNCEMENTS,
    ENTITY_BUDGETS,
    ENTITY_CHECKLIST,
    ENTITY_CONTRACTS,
    ENTITY_DECISIONS,
    ENTITY_DOCUMENTS,
    ENTITY_EQUIPMENT,
    ENTITY_MINUTES,
    ENTITY_NAMES,
    ENTITY_POLICIES,
    ENTITY_REQUESTS,
    ENTITY_SUPPLIERS,
    ENTITY_TRANSACTIONS,
    DataFetchError,
    Storage,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CondominiumDataset:
    """All rows one evaluation pass reads, fetched together."""

    transactions: list[Any] = field(default_factory=list)
    budgets: list[Any] = field(default_factory=list)
    contracts: list[Any] = field(default_factory=list)
    insurance_policies: list[Any] = field(default_factory=list)
    decisions: list[Any] = field(default_factory=list)
    meeting_minutes: list[Any] = field(default_factory=list)
    checklist_items: list[Any] = field(default_factory=list)
    maintenance_requests: list[Any] = field(default_factory=list)
    equipment: list[Any] = field(default_factory=list)
    suppliers: list[Any] = field(default_factory=list)
    documents: list[Any] = field(default_factory=list)
    announcements: list[Any] = field(default_factory=list)


# Storage entity name → CondominiumDataset attribute
DATASET_FIELDS: dict[str, str] = {
    ENTITY_TRANSACTIONS: "transactions",
    ENTITY_BUDGETS: "budgets",
    ENTITY_CONTRACTS: "contracts",
    ENTITY_POLICIES: "insurance_policies",
    ENTITY_DECISIONS: "decisions",
    ENTITY_MINUTES: "meeting_minutes",
    ENTITY_CHECKLIST: "checklist_items",
    ENTITY_REQUESTS: "maintenance_requests",
    ENTITY_EQUIPMENT: "equipment",
    ENTITY_SUPPLIERS: "suppliers",
    ENTITY_DOCUMENTS: "documents",
    ENTITY_ANNOUNCEMENTS: "announcements",
}


def _fetch(storage: Storage, entity: str, condominium_id: str | None) -> list[Any]:
    try:
        return list(storage.list_rows(entity, condominium_id))
    except Exception as exc:
        raise DataFetchError(entity, exc) from exc


def _build_dataset(results: dict[str, list[Any]]) -> CondominiumDataset:
    return CondominiumDataset(**{DATASET_FIELDS[e]: rows for e, rows in results.items()})


async def load_dataset(storage: Storage, condominium_id: str | None) -> CondominiumDataset:
    """Fetch all entity types concurrently and return one consistent dataset.

    Raises:
        DataFetchError: when any single fetch fails.
    """
    rows = await asyncio.gather(
        *(run_in_threadpool(_fetch, storage, entity, condominium_id) for entity in ENTITY_NAMES)
    )
    logger.debug(
        "Dataset loaded: condominium_id=%s rows=%d", condominium_id, sum(len(r) for r in rows)
    )
    return _build_dataset(dict(zip(ENTITY_NAMES, rows)))


def load_dataset_sync(storage: Storage, condominium_id: str | None) -> CondominiumDataset:
    """Sequential variant for scripts running outside an event loop."""
    return _build_dataset({e: _fetch(storage, e, condominium_id) for e in ENTITY_NAMES})
