"""Executive dashboard engine: metrics → pillars → overall score and alerts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.config import get_settings
from app.services.executive.alerts import (
    Alert,
    generate_alerts,
    sort_alerts,
    total_financial_impact,
)
from app.services.executive.dataset_loader import CondominiumDataset, load_dataset
from app.services.executive.metrics import MetricSnapshot, extract_metrics
from app.services.executive.pillars import PillarScore, compute_overall, score_pillars
from app.services.executive.scoring_constants import (
    EXPIRING_WINDOW_DAYS,
    RECENT_ANNOUNCEMENTS_DAYS,
    RECENT_DECISIONS_DAYS,
    RISK_LEVELS,
    maturity_for_score,
)
from app.storage.base import Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutiveSummary:
    """Single outward artifact of one evaluation pass."""

    condominium_id: str | None
    generated_at: datetime
    overall_score: int
    maturity: str
    pillars: list[PillarScore]
    alerts: list[Alert]
    financial_impact: float
    risk_distribution: dict[str, int]
    metrics: dict[str, int] = field(default_factory=dict)


def risk_distribution(pillars: list[PillarScore]) -> dict[str, int]:
    """Count pillars per risk level; every level present, zero when unused."""
    counts = {level: 0 for level in RISK_LEVELS}
    for p in pillars:
        counts[p.risk_level] += 1
    return counts


def display_metrics(m: MetricSnapshot) -> dict[str, int]:
    """Raw entity counts shown next to the scores."""
    return {
        "equipment": m.equipment_total,
        "suppliers": m.suppliers_total,
        "documents": m.documents_total,
        "contracts": m.contracts_total,
        "active_contracts": m.contracts_active,
        "insurance_policies": m.policies_total,
        "transactions": m.transactions_total,
        "overdue_payments": m.overdue_payments,
        "budgets": m.budgets_total,
        "maintenance_requests": m.requests_total,
        "open_requests": m.requests_open,
        "urgent_requests": m.requests_urgent,
        "checklist_items": m.checklist_total,
        "decisions": m.decisions_total,
        "meeting_minutes": m.minutes_total,
        "announcements": m.announcements_total,
    }


def compute_executive_summary(
    dataset: CondominiumDataset,
    now: datetime,
    condominium_id: str | None = None,
    expiring_days: int = EXPIRING_WINDOW_DAYS,
    recent_decisions_days: int = RECENT_DECISIONS_DAYS,
    recent_announcements_days: int = RECENT_ANNOUNCEMENTS_DAYS,
) -> ExecutiveSummary:
    """Compute the ExecutiveSummary for one dataset. Pure given dataset and now."""
    metrics = extract_metrics(
        dataset,
        now,
        expiring_days=expiring_days,
        recent_decisions_days=recent_decisions_days,
        recent_announcements_days=recent_announcements_days,
    )
    pillars = score_pillars(metrics)
    overall = compute_overall(pillars)
    alerts = sort_alerts(generate_alerts(metrics, now))

    return ExecutiveSummary(
        condominium_id=condominium_id,
        generated_at=now,
        overall_score=overall,
        maturity=maturity_for_score(overall),
        pillars=pillars,
        alerts=alerts,
        financial_impact=total_financial_impact(alerts),
        risk_distribution=risk_distribution(pillars),
        metrics=display_metrics(metrics),
    )


async def build_executive_summary(
    storage: Storage,
    condominium_id: str | None,
    now: datetime | None = None,
) -> ExecutiveSummary:
    """Load one tenant's rows and compute its summary.

    Raises:
        DataFetchError: when any fetch fails; no partial summary is produced.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    settings = get_settings()

    dataset = await load_dataset(storage, condominium_id)
    summary = compute_executive_summary(
        dataset,
        now,
        condominium_id=condominium_id,
        expiring_days=settings.expiring_window_days,
        recent_decisions_days=settings.recent_decisions_days,
        recent_announcements_days=settings.recent_announcements_days,
    )
    logger.info(
        "Executive summary computed: condominium_id=%s overall=%d maturity=%s alerts=%d impact=%.2f",
        condominium_id,
        summary.overall_score,
        summary.maturity,
        len(summary.alerts),
        summary.financial_impact,
    )
    return summary
