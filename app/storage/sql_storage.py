"""SQLAlchemy-backed storage. One short-lived session per read."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from app.db.session import SessionLocal
from app.models import (
    Announcement,
    Budget,
    Contract,
    Document,
    Equipment,
    FinancialTransaction,
    GovernanceDecision,
    InsurancePolicy,
    LegalChecklistItem,
    MaintenanceRequest,
    MeetingMinutes,
    Supplier,
)
from app.storage.base import (
    ENTITY_ANNOUNCEMENTS,
    ENTITY_BUDGETS,
    ENTITY_CHECKLIST,
    ENTITY_CONTRACTS,
    ENTITY_DECISIONS,
    ENTITY_DOCUMENTS,
    ENTITY_EQUIPMENT,
    ENTITY_MINUTES,
    ENTITY_POLICIES,
    ENTITY_REQUESTS,
    ENTITY_SUPPLIERS,
    ENTITY_TRANSACTIONS,
    validate_entity,
)

logger = logging.getLogger(__name__)

ENTITY_MODELS: dict[str, type] = {
    ENTITY_TRANSACTIONS: FinancialTransaction,
    ENTITY_BUDGETS: Budget,
    ENTITY_CONTRACTS: Contract,
    ENTITY_POLICIES: InsurancePolicy,
    ENTITY_DECISIONS: GovernanceDecision,
    ENTITY_MINUTES: MeetingMinutes,
    ENTITY_CHECKLIST: LegalChecklistItem,
    ENTITY_REQUESTS: MaintenanceRequest,
    ENTITY_EQUIPMENT: Equipment,
    ENTITY_SUPPLIERS: Supplier,
    ENTITY_DOCUMENTS: Document,
    ENTITY_ANNOUNCEMENTS: Announcement,
}


class SqlStorage:
    """Read rows through SQLAlchemy.

    Each call opens and closes its own session so concurrent reads from the
    dataset loader never share a Session (Sessions are not thread-safe).
    """

    def __init__(self, session_factory: sessionmaker[Session] = SessionLocal) -> None:
        self._session_factory = session_factory

    def list_rows(self, entity: str, condominium_id: str | None = None) -> list[Any]:
        model = ENTITY_MODELS[validate_entity(entity)]
        with self._session_factory() as db:
            query = db.query(model)
            if condominium_id is not None:
                query = query.filter(model.condominium_id == condominium_id)
            rows = query.all()
        logger.debug("Fetched %d %s rows (condominium_id=%s)", len(rows), entity, condominium_id)
        return rows
