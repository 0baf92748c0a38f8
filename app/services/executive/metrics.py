"""Metric extractors for the executive dashboard.

Pure functions over raw rows and a reference date. Rows may be ORM objects,
dataclasses or mappings; missing or malformed fields count as zero/null and
never raise. Dates are compared at day granularity: "overdue"/"expired"
means strictly before today, "expiring" means today up to today + window.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

from app.services.executive.scoring_constants import (
    EXPIRING_WINDOW_DAYS,
    OPERATIONS_MIN_DOCUMENTS,
    RECENT_ANNOUNCEMENTS_DAYS,
    RECENT_DECISIONS_DAYS,
)
from app.storage.base import row_value

if TYPE_CHECKING:
    from app.services.executive.dataset_loader import CondominiumDataset

TYPE_INCOME = "receita"
TYPE_EXPENSE = "despesa"
STATUS_PENDING = "pendente"
PAID_STATUSES: frozenset[str] = frozenset({"pago", "confirmado"})
CANCELLED_STATUSES: frozenset[str] = frozenset({"cancelado", "cancelada"})

REQUEST_DONE_STATUSES: frozenset[str] = frozenset({"concluído", "concluido"})
PRIORITY_URGENT = "urgente"

CONTRACT_ACTIVE = "ativo"
CONTRACT_EXPIRED = "vencido"
CONTRACT_CLOSED_STATUSES: frozenset[str] = frozenset({"encerrado", "cancelado"})

DECISION_APPROVED = "aprovada"
MINUTES_PUBLISHED = "publicada"

CHECKLIST_UP_TO_DATE = "em_dia"
CHECKLIST_OVERDUE = "vencido"


@dataclass(frozen=True)
class MetricSnapshot:
    """Counts and sums for one evaluation pass. Never persisted."""

    transactions_total: int = 0
    overdue_payments: int = 0
    overdue_amount: float = 0.0
    income_total: float = 0.0
    expense_total: float = 0.0
    budgets_total: int = 0
    budget_planned: float = 0.0
    budget_spent: float = 0.0
    requests_total: int = 0
    requests_open: int = 0
    requests_completed: int = 0
    requests_urgent: int = 0
    contracts_total: int = 0
    contracts_active: int = 0
    contracts_expiring: int = 0
    contracts_expired: int = 0
    policies_total: int = 0
    policies_expired: int = 0
    policies_expiring: int = 0
    policies_expired_coverage: float = 0.0
    documents_total: int = 0
    documents_expired: int = 0
    documents_expiring: int = 0
    checklist_total: int = 0
    checklist_pending: int = 0
    checklist_overdue: int = 0
    decisions_total: int = 0
    decisions_approved: int = 0
    decisions_recent: int = 0
    minutes_total: int = 0
    minutes_published: int = 0
    announcements_total: int = 0
    announcements_recent: int = 0
    equipment_total: int = 0
    suppliers_total: int = 0

    @property
    def has_equipment(self) -> bool:
        return self.equipment_total > 0

    @property
    def has_documentation(self) -> bool:
        return self.documents_total > OPERATIONS_MIN_DOCUMENTS

    @property
    def has_suppliers(self) -> bool:
        return self.suppliers_total > 0


# ── Field coercion ───────────────────────────────────────────────────────


def to_amount(value: Any) -> float:
    """Return value as a finite float; anything unparsable is 0.0."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def _utc_date(value: datetime) -> date:
    """Calendar date in UTC; naive datetimes are taken as UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


def to_date(value: Any) -> date | None:
    """Return the calendar date of a datetime, date or ISO string; else None."""
    if isinstance(value, datetime):
        return _utc_date(value)
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return _utc_date(datetime.fromisoformat(text))
        except ValueError:
            try:
                return date.fromisoformat(text[:10])
            except ValueError:
                return None
    return None


def _status(row: Any, field: str = "status") -> str:
    return str(row_value(row, field, "")).strip().lower()


def days_until(value: Any, today: date) -> int | None:
    """Days from today to the date in value (negative when in the past)."""
    d = to_date(value)
    if d is None:
        return None
    return (d - today).days


def is_overdue(value: Any, today: date) -> bool:
    """True when the date is strictly before today."""
    days = days_until(value, today)
    return days is not None and days < 0


def is_expiring(value: Any, today: date, window_days: int = EXPIRING_WINDOW_DAYS) -> bool:
    """True when the date falls in [today, today + window_days]."""
    days = days_until(value, today)
    return days is not None and 0 <= days <= window_days


def is_recent(value: Any, today: date, window_days: int) -> bool:
    """True when the date falls in [today - window_days, today]."""
    days = days_until(value, today)
    return days is not None and -window_days <= days <= 0


# ── Extractors ───────────────────────────────────────────────────────────


def count_overdue_payments(transactions: Iterable[Any], today: date) -> tuple[int, float]:
    """Return (count, total amount) of pending transactions past their due date."""
    count = 0
    total = 0.0
    for tx in transactions:
        if _status(tx) != STATUS_PENDING:
            continue
        if _status(tx, "type") not in (TYPE_INCOME, TYPE_EXPENSE):
            continue
        if is_overdue(row_value(tx, "due_date"), today):
            count += 1
            total += abs(to_amount(row_value(tx, "amount")))
    return count, total


def count_active_transactions(transactions: Iterable[Any]) -> int:
    """Number of transactions that are not cancelled."""
    return sum(1 for tx in transactions if _status(tx) not in CANCELLED_STATUSES)


def sum_cash_flow(transactions: Iterable[Any]) -> tuple[float, float]:
    """Return (income, expense) totals over paid transactions."""
    income = 0.0
    expense = 0.0
    for tx in transactions:
        if _status(tx) not in PAID_STATUSES:
            continue
        amount = abs(to_amount(row_value(tx, "amount")))
        kind = _status(tx, "type")
        if kind == TYPE_INCOME:
            income += amount
        elif kind == TYPE_EXPENSE:
            expense += amount
    return income, expense


def sum_budgets(budgets: Iterable[Any]) -> tuple[float, float]:
    """Return (planned, spent) totals across budget lines."""
    planned = 0.0
    spent = 0.0
    for b in budgets:
        planned += max(0.0, to_amount(row_value(b, "planned_amount")))
        spent += max(0.0, to_amount(row_value(b, "spent_amount")))
    return planned, spent


def count_maintenance_requests(requests: Iterable[Any]) -> tuple[int, int, int, int]:
    """Return (total, open, completed, urgent) request counts.

    Urgent counts only open requests with priority "urgente".
    """
    total = open_count = completed = urgent = 0
    for req in requests:
        total += 1
        if _status(req) in REQUEST_DONE_STATUSES:
            completed += 1
            continue
        open_count += 1
        if _status(req, "priority") == PRIORITY_URGENT:
            urgent += 1
    return total, open_count, completed, urgent


def count_contracts(
    contracts: Iterable[Any], today: date, window_days: int = EXPIRING_WINDOW_DAYS
) -> tuple[int, int, int, int]:
    """Return (total, active, expiring, expired) contract counts.

    Closed contracts (encerrado/cancelado) count only toward the total.
    Expiring contracts are a subset of active ones.
    """
    total = active = expiring = expired = 0
    for c in contracts:
        total += 1
        status = _status(c)
        if status in CONTRACT_CLOSED_STATUSES:
            continue
        end = row_value(c, "end_date")
        if status == CONTRACT_EXPIRED or is_overdue(end, today):
            expired += 1
            continue
        if status != CONTRACT_ACTIVE:
            continue
        active += 1
        if is_expiring(end, today, window_days):
            expiring += 1
    return total, active, expiring, expired


def count_policies(
    policies: Iterable[Any], today: date, window_days: int = EXPIRING_WINDOW_DAYS
) -> tuple[int, int, int, float]:
    """Return (total, expired, expiring, expired coverage) for insurance policies."""
    total = expired = expiring = 0
    expired_coverage = 0.0
    for p in policies:
        total += 1
        status = _status(p)
        if status in CANCELLED_STATUSES:
            continue
        end = row_value(p, "end_date")
        if status == CONTRACT_EXPIRED or is_overdue(end, today):
            expired += 1
            expired_coverage += max(0.0, to_amount(row_value(p, "coverage_amount")))
        elif is_expiring(end, today, window_days):
            expiring += 1
    return total, expired, expiring, expired_coverage


def count_document_expiry(
    documents: Iterable[Any], today: date, window_days: int = EXPIRING_WINDOW_DAYS
) -> tuple[int, int, int]:
    """Return (total, expired, expiring) document counts. No expiration date → neither."""
    total = expired = expiring = 0
    for doc in documents:
        total += 1
        exp = row_value(doc, "expiration_date")
        if is_overdue(exp, today):
            expired += 1
        elif is_expiring(exp, today, window_days):
            expiring += 1
    return total, expired, expiring


def count_checklist_items(items: Iterable[Any], today: date) -> tuple[int, int, int]:
    """Return (total, pending, overdue) legal checklist counts.

    Overdue: status "vencido", or any status other than "em_dia" whose
    next_due_date is past. Pending: status "pendente" and not overdue.
    """
    total = pending = overdue = 0
    for item in items:
        total += 1
        status = _status(item)
        if status == CHECKLIST_UP_TO_DATE:
            continue
        if status == CHECKLIST_OVERDUE or is_overdue(row_value(item, "next_due_date"), today):
            overdue += 1
        elif status == STATUS_PENDING:
            pending += 1
    return total, pending, overdue


def count_decisions(
    decisions: Iterable[Any], today: date, recent_days: int = RECENT_DECISIONS_DAYS
) -> tuple[int, int, int]:
    """Return (total, approved, recent) governance decision counts."""
    total = approved = recent = 0
    for d in decisions:
        total += 1
        if _status(d) == DECISION_APPROVED:
            approved += 1
        if is_recent(row_value(d, "decision_date"), today, recent_days):
            recent += 1
    return total, approved, recent


def count_published_minutes(minutes: Iterable[Any]) -> int:
    return sum(1 for m in minutes if _status(m) == MINUTES_PUBLISHED)


def count_recent(rows: Iterable[Any], field: str, today: date, window_days: int) -> int:
    """Number of rows whose ``field`` date lies within the last window_days."""
    return sum(1 for r in rows if is_recent(row_value(r, field), today, window_days))


def extract_metrics(
    dataset: CondominiumDataset,
    now: datetime | date,
    expiring_days: int = EXPIRING_WINDOW_DAYS,
    recent_decisions_days: int = RECENT_DECISIONS_DAYS,
    recent_announcements_days: int = RECENT_ANNOUNCEMENTS_DAYS,
) -> MetricSnapshot:
    """Derive the MetricSnapshot for one tenant's rows at ``now``."""
    today = to_date(now) or date.today()

    overdue_count, overdue_amount = count_overdue_payments(dataset.transactions, today)
    income, expense = sum_cash_flow(dataset.transactions)
    planned, spent = sum_budgets(dataset.budgets)
    req_total, req_open, req_done, req_urgent = count_maintenance_requests(
        dataset.maintenance_requests
    )
    c_total, c_active, c_expiring, c_expired = count_contracts(
        dataset.contracts, today, expiring_days
    )
    p_total, p_expired, p_expiring, p_coverage = count_policies(
        dataset.insurance_policies, today, expiring_days
    )
    doc_total, doc_expired, doc_expiring = count_document_expiry(
        dataset.documents, today, expiring_days
    )
    chk_total, chk_pending, chk_overdue = count_checklist_items(dataset.checklist_items, today)
    dec_total, dec_approved, dec_recent = count_decisions(
        dataset.decisions, today, recent_decisions_days
    )

    return MetricSnapshot(
        transactions_total=count_active_transactions(dataset.transactions),
        overdue_payments=overdue_count,
        overdue_amount=overdue_amount,
        income_total=income,
        expense_total=expense,
        budgets_total=len(dataset.budgets),
        budget_planned=planned,
        budget_spent=spent,
        requests_total=req_total,
        requests_open=req_open,
        requests_completed=req_done,
        requests_urgent=req_urgent,
        contracts_total=c_total,
        contracts_active=c_active,
        contracts_expiring=c_expiring,
        contracts_expired=c_expired,
        policies_total=p_total,
        policies_expired=p_expired,
        policies_expiring=p_expiring,
        policies_expired_coverage=p_coverage,
        documents_total=doc_total,
        documents_expired=doc_expired,
        documents_expiring=doc_expiring,
        checklist_total=chk_total,
        checklist_pending=chk_pending,
        checklist_overdue=chk_overdue,
        decisions_total=dec_total,
        decisions_approved=dec_approved,
        decisions_recent=dec_recent,
        minutes_total=len(dataset.meeting_minutes),
        minutes_published=count_published_minutes(dataset.meeting_minutes),
        announcements_total=len(dataset.announcements),
        announcements_recent=count_recent(
            dataset.announcements, "created_at", today, recent_announcements_days
        ),
        equipment_total=len(dataset.equipment),
        suppliers_total=len(dataset.suppliers),
    )
