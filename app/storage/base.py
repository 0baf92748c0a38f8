"""Storage capability shared by the SQL and in-memory backends.

Each backend exposes one read operation, ``list_rows(entity, condominium_id)``,
returning plain records (ORM objects, dataclasses or mappings). Passing
``condominium_id=None`` returns rows for every tenant.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

ENTITY_TRANSACTIONS = "financial_transactions"
ENTITY_BUDGETS = "budgets"
ENTITY_CONTRACTS = "contracts"
ENTITY_POLICIES = "insurance_policies"
ENTITY_DECISIONS = "governance_decisions"
ENTITY_MINUTES = "meeting_minutes"
ENTITY_CHECKLIST = "legal_checklist_items"
ENTITY_REQUESTS = "maintenance_requests"
ENTITY_EQUIPMENT = "equipment"
ENTITY_SUPPLIERS = "suppliers"
ENTITY_DOCUMENTS = "documents"
ENTITY_ANNOUNCEMENTS = "announcements"

ENTITY_NAMES: tuple[str, ...] = (
    ENTITY_TRANSACTIONS,
    ENTITY_BUDGETS,
    ENTITY_CONTRACTS,
    ENTITY_POLICIES,
    ENTITY_DECISIONS,
    ENTITY_MINUTES,
    ENTITY_CHECKLIST,
    ENTITY_REQUESTS,
    ENTITY_EQUIPMENT,
    ENTITY_SUPPLIERS,
    ENTITY_DOCUMENTS,
    ENTITY_ANNOUNCEMENTS,
)


class DataFetchError(Exception):
    """Raised when reading one entity type fails; aborts the whole evaluation."""

    def __init__(self, entity: str, cause: BaseException) -> None:
        self.entity = entity
        self.cause = cause
        super().__init__(f"Failed to fetch {entity}: {cause}")


class Storage(Protocol):
    """Minimal read interface consumed by the dataset loader."""

    def list_rows(self, entity: str, condominium_id: str | None = None) -> list[Any]: ...


def row_value(row: Any, field: str, default: Any = None) -> Any:
    """Return ``field`` from a mapping or attribute-style row, or ``default``."""
    if isinstance(row, Mapping):
        value = row.get(field, default)
    else:
        value = getattr(row, field, default)
    return default if value is None else value


def validate_entity(entity: str) -> str:
    """Return entity unchanged; raise ValueError if it is not a known entity type."""
    if entity not in ENTITY_NAMES:
        raise ValueError(f"Unknown entity type: {entity!r}")
    return entity
