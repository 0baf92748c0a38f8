"""Pillar calculators for the executive dashboard.

Each ``compute_*`` returns the pillar's base value before clamping;
``score_pillars`` clamps every pillar to [20, 100] and attaches its fixed
weight. Uses scoring_constants for all coefficients.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from app.services.executive.metrics import MetricSnapshot
from app.services.executive.scoring_constants import (
    COMPLIANCE_PROBLEM_PENALTY,
    COMPLIANCE_WARNING_PENALTY,
    CONTRACTS_EMPTY_SCORE,
    CONTRACTS_EXPIRED_PENALTY,
    CONTRACTS_EXPIRING_PENALTY,
    FINANCE_NEUTRAL_SUBSCORE,
    FINANCE_WEIGHT_ADHERENCE,
    FINANCE_WEIGHT_CASH_FLOW,
    FINANCE_WEIGHT_PAYMENT_HEALTH,
    GOVERNANCE_APPROVAL_FACTOR,
    GOVERNANCE_BASE,
    GOVERNANCE_EMPTY_SCORE,
    GOVERNANCE_MINUTES_ONLY_BASE,
    GOVERNANCE_MINUTES_POINTS,
    GOVERNANCE_RECENT_DECISION_POINTS,
    MAINTENANCE_FLOOR,
    MAINTENANCE_URGENT_PENALTY,
    OPERATIONS_BASE,
    OPERATIONS_PRESENCE_POINTS,
    PILLAR_COMPLIANCE,
    PILLAR_CONTRACTS,
    PILLAR_FINANCE,
    PILLAR_GOVERNANCE,
    PILLAR_LABELS,
    PILLAR_MAINTENANCE,
    PILLAR_OPERATIONS,
    PILLAR_TRANSPARENCY,
    PILLAR_WEIGHTS,
    SCORE_CEILING,
    SCORE_FLOOR,
    TRANSPARENCY_ANNOUNCEMENT_POINTS,
    TRANSPARENCY_BASE,
    TRANSPARENCY_MINUTES_POINTS,
    maturity_for_score,
    risk_for_score,
)


@dataclass(frozen=True)
class PillarScore:
    """One scored maturity dimension. Risk and maturity derive from score."""

    name: str
    label: str
    score: int
    weight: int

    @property
    def risk_level(self) -> str:
        return risk_for_score(self.score)

    @property
    def maturity(self) -> str:
        return maturity_for_score(self.score)


def round_half_up(value: float) -> int:
    """Round to nearest integer, .5 away from zero for positives (not banker's)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round and clamp a base value to [SCORE_FLOOR, SCORE_CEILING]."""
    if not math.isfinite(value):
        return SCORE_FLOOR
    return max(SCORE_FLOOR, min(SCORE_CEILING, round_half_up(value)))


def _ratio_pct(part: float, whole: float) -> float:
    """part / whole as a percentage; a zero denominator is replaced by 1."""
    return part / (whole or 1) * 100


# ── Governance ───────────────────────────────────────────────────────────


def compute_governance(m: MetricSnapshot) -> float:
    """Governance from approval rate, published minutes and recent decisions."""
    if m.decisions_total > 0:
        approval_rate = _ratio_pct(m.decisions_approved, m.decisions_total)
        return (
            GOVERNANCE_BASE
            + approval_rate * GOVERNANCE_APPROVAL_FACTOR
            + m.minutes_published * GOVERNANCE_MINUTES_POINTS
            + m.decisions_recent * GOVERNANCE_RECENT_DECISION_POINTS
        )
    if m.minutes_published > 0:
        return GOVERNANCE_MINUTES_ONLY_BASE + m.minutes_published * GOVERNANCE_MINUTES_POINTS
    return GOVERNANCE_EMPTY_SCORE


# ── Finance ──────────────────────────────────────────────────────────────


def budget_adherence(m: MetricSnapshot) -> float:
    """100 when spending stays within plan; loses one point per percent overrun."""
    if m.budget_planned <= 0:
        return FINANCE_NEUTRAL_SUBSCORE
    if m.budget_spent <= m.budget_planned:
        return 100.0
    overrun_pct = (m.budget_spent - m.budget_planned) / m.budget_planned * 100
    return max(0.0, 100.0 - overrun_pct)


def payment_health(m: MetricSnapshot) -> float:
    """Share of transactions that are not overdue."""
    if m.transactions_total <= 0:
        return FINANCE_NEUTRAL_SUBSCORE
    return max(0.0, 100.0 - _ratio_pct(m.overdue_payments, m.transactions_total))


def cash_flow_balance(m: MetricSnapshot) -> float:
    """50 at break-even, 100 with no expenses, 0 with no income."""
    largest = max(m.income_total, m.expense_total)
    if largest <= 0:
        return FINANCE_NEUTRAL_SUBSCORE
    return 50.0 + (m.income_total - m.expense_total) / largest * 50.0


def compute_finance(m: MetricSnapshot) -> float:
    return (
        FINANCE_WEIGHT_ADHERENCE * budget_adherence(m)
        + FINANCE_WEIGHT_PAYMENT_HEALTH * payment_health(m)
        + FINANCE_WEIGHT_CASH_FLOW * cash_flow_balance(m)
    )


# ── Maintenance / Contracts / Compliance ─────────────────────────────────


def compute_maintenance(m: MetricSnapshot) -> float:
    """Completion rate minus urgent penalty, floored before the outer clamp."""
    completion_rate = _ratio_pct(m.requests_completed, m.requests_total)
    return max(MAINTENANCE_FLOOR, completion_rate - m.requests_urgent * MAINTENANCE_URGENT_PENALTY)


def compute_contracts(m: MetricSnapshot) -> float:
    if m.contracts_total == 0:
        return CONTRACTS_EMPTY_SCORE
    active_rate = _ratio_pct(m.contracts_active, m.contracts_total)
    return (
        active_rate
        - m.contracts_expiring * CONTRACTS_EXPIRING_PENALTY
        - m.contracts_expired * CONTRACTS_EXPIRED_PENALTY
    )


def compliance_problem_items(m: MetricSnapshot) -> int:
    return m.checklist_overdue + m.documents_expired + m.policies_expired


def compliance_warning_items(m: MetricSnapshot) -> int:
    return m.checklist_pending + m.documents_expiring + m.policies_expiring


def compute_compliance(m: MetricSnapshot) -> float:
    return (
        100
        - compliance_problem_items(m) * COMPLIANCE_PROBLEM_PENALTY
        - compliance_warning_items(m) * COMPLIANCE_WARNING_PENALTY
    )


# ── Operations / Transparency ────────────────────────────────────────────


def compute_operations(m: MetricSnapshot) -> float:
    present = sum((m.has_equipment, m.has_documentation, m.has_suppliers))
    return OPERATIONS_BASE + OPERATIONS_PRESENCE_POINTS * present


def compute_transparency(m: MetricSnapshot) -> float:
    return min(
        100,
        TRANSPARENCY_BASE
        + m.announcements_recent * TRANSPARENCY_ANNOUNCEMENT_POINTS
        + m.minutes_published * TRANSPARENCY_MINUTES_POINTS,
    )


PILLAR_CALCULATORS = {
    PILLAR_GOVERNANCE: compute_governance,
    PILLAR_FINANCE: compute_finance,
    PILLAR_MAINTENANCE: compute_maintenance,
    PILLAR_CONTRACTS: compute_contracts,
    PILLAR_COMPLIANCE: compute_compliance,
    PILLAR_OPERATIONS: compute_operations,
    PILLAR_TRANSPARENCY: compute_transparency,
}


def score_pillars(m: MetricSnapshot) -> list[PillarScore]:
    """Score all seven pillars in fixed order, each clamped to [20, 100]."""
    return [
        PillarScore(
            name=name,
            label=PILLAR_LABELS[name],
            score=clamp_score(calc(m)),
            weight=PILLAR_WEIGHTS[name],
        )
        for name, calc in PILLAR_CALCULATORS.items()
    ]


def compute_overall(pillars: list[PillarScore]) -> int:
    """Weighted average of clamped pillar scores, rounded half up.

    Integer arithmetic: weights sum to 100, so the weighted sum is exact.
    """
    total_weight = sum(p.weight for p in pillars)
    if total_weight <= 0:
        return SCORE_FLOOR
    weighted = sum(p.score * p.weight for p in pillars)
    return (2 * weighted + total_weight) // (2 * total_weight)
