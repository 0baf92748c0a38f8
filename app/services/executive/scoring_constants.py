"""Executive dashboard scoring constants.

Centralized configuration for the pillar scorer and alert rules. No magic
numbers inside the scorer; all values defined here.
"""

from __future__ import annotations

# ── Pillars and weights (sum 100) ─────────────────────────────────────────

PILLAR_GOVERNANCE = "governance"
PILLAR_FINANCE = "finance"
PILLAR_MAINTENANCE = "maintenance"
PILLAR_CONTRACTS = "contracts"
PILLAR_COMPLIANCE = "compliance"
PILLAR_OPERATIONS = "operations"
PILLAR_TRANSPARENCY = "transparency"

PILLAR_WEIGHTS: dict[str, int] = {
    PILLAR_GOVERNANCE: 20,
    PILLAR_FINANCE: 20,
    PILLAR_MAINTENANCE: 20,
    PILLAR_CONTRACTS: 15,
    PILLAR_COMPLIANCE: 15,
    PILLAR_OPERATIONS: 5,
    PILLAR_TRANSPARENCY: 5,
}

PILLAR_LABELS: dict[str, str] = {
    PILLAR_GOVERNANCE: "Governança",
    PILLAR_FINANCE: "Financeiro",
    PILLAR_MAINTENANCE: "Manutenção",
    PILLAR_CONTRACTS: "Contratos",
    PILLAR_COMPLIANCE: "Conformidade",
    PILLAR_OPERATIONS: "Operações",
    PILLAR_TRANSPARENCY: "Transparência",
}

# ── Score bounds ─────────────────────────────────────────────────────────

SCORE_FLOOR: int = 20
SCORE_CEILING: int = 100

# ── Maturity and risk thresholds (overall and per pillar) ────────────────

MATURITY_SMART = "smart"
MATURITY_STRUCTURED = "structured"
MATURITY_EVOLVING = "evolving"
MATURITY_BEGINNER = "beginner"

MATURITY_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (80, MATURITY_SMART),
    (60, MATURITY_STRUCTURED),
    (40, MATURITY_EVOLVING),
)

RISK_LOW = "low"
RISK_MEDIUM = "medium"
RISK_HIGH = "high"
RISK_LEVELS: tuple[str, ...] = (RISK_LOW, RISK_MEDIUM, RISK_HIGH)

RISK_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (70, RISK_LOW),
    (40, RISK_MEDIUM),
)

# ── Pillar formulas ──────────────────────────────────────────────────────

GOVERNANCE_BASE: float = 40
GOVERNANCE_APPROVAL_FACTOR: float = 0.3
GOVERNANCE_MINUTES_POINTS: float = 5
GOVERNANCE_RECENT_DECISION_POINTS: float = 10
GOVERNANCE_MINUTES_ONLY_BASE: float = 60
GOVERNANCE_EMPTY_SCORE: float = 50

FINANCE_WEIGHT_ADHERENCE: float = 0.4
FINANCE_WEIGHT_PAYMENT_HEALTH: float = 0.3
FINANCE_WEIGHT_CASH_FLOW: float = 0.3
FINANCE_NEUTRAL_SUBSCORE: float = 50

MAINTENANCE_URGENT_PENALTY: float = 5
MAINTENANCE_FLOOR: float = 20

CONTRACTS_EMPTY_SCORE: float = 30
CONTRACTS_EXPIRING_PENALTY: float = 10
CONTRACTS_EXPIRED_PENALTY: float = 20

COMPLIANCE_PROBLEM_PENALTY: float = 15
COMPLIANCE_WARNING_PENALTY: float = 5

OPERATIONS_BASE: float = 40
OPERATIONS_PRESENCE_POINTS: float = 20
OPERATIONS_MIN_DOCUMENTS: int = 5  # documentation counts only above this many files

TRANSPARENCY_BASE: float = 30
TRANSPARENCY_ANNOUNCEMENT_POINTS: float = 15
TRANSPARENCY_MINUTES_POINTS: float = 10

# ── Extraction windows (days) ────────────────────────────────────────────

EXPIRING_WINDOW_DAYS: int = 30
RECENT_DECISIONS_DAYS: int = 90
RECENT_ANNOUNCEMENTS_DAYS: int = 30

# ── Alert severities, most severe first ──────────────────────────────────

SEVERITY_CRITICAL = "critico"
SEVERITY_HIGH = "alto"
SEVERITY_MEDIUM = "medio"
SEVERITY_LOW = "baixo"
SEVERITY_INFO = "info"

SEVERITY_ORDER: tuple[str, ...] = (
    SEVERITY_CRITICAL,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
    SEVERITY_LOW,
    SEVERITY_INFO,
)
SEVERITY_RANK: dict[str, int] = {sev: i for i, sev in enumerate(SEVERITY_ORDER)}

# ── Alert thresholds and estimated impacts (BRL) ─────────────────────────

OVERDUE_PAYMENTS_HIGH_COUNT: int = 5  # > this → alto

OPEN_REQUESTS_ALERT_COUNT: int = 5  # > this → alert
OPEN_REQUESTS_HIGH_COUNT: int = 15  # > this → alto
IMPACT_PER_OPEN_REQUEST: float = 200
IMPACT_PER_URGENT_REQUEST: float = 1000

IMPACT_PER_EXPIRED_CONTRACT: float = 2000
IMPACT_PER_EXPIRING_CONTRACT: float = 1000

IMPACT_PER_EXPIRED_DOCUMENT: float = 1000
IMPACT_PER_EXPIRING_DOCUMENT: float = 500

IMPACT_PER_EXPIRING_POLICY: float = 1000


def maturity_for_score(score: float) -> str:
    """Return maturity label: >=80 smart, >=60 structured, >=40 evolving, else beginner."""
    for threshold, label in MATURITY_THRESHOLDS:
        if score >= threshold:
            return label
    return MATURITY_BEGINNER


def risk_for_score(score: float) -> str:
    """Return risk level: >=70 low, >=40 medium, else high."""
    for threshold, level in RISK_THRESHOLDS:
        if score >= threshold:
            return level
    return RISK_HIGH
