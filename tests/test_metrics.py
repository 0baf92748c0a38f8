"""Tests for executive dashboard metric extractors."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from app.services.executive.dataset_loader import CondominiumDataset
from app.services.executive.metrics import (
    count_checklist_items,
    count_contracts,
    count_decisions,
    count_document_expiry,
    count_maintenance_requests,
    count_overdue_payments,
    count_policies,
    count_published_minutes,
    extract_metrics,
    is_expiring,
    is_overdue,
    sum_budgets,
    sum_cash_flow,
    to_amount,
    to_date,
)
from tests.row_factories import (
    Row,
    announcement,
    checklist_item,
    contract,
    days_from_now,
    decision,
    document,
    expense,
    income,
    minutes,
    policy,
    request,
)
from tests.test_constants import FIXED_NOW

TODAY = FIXED_NOW.date()


# ── Coercion ─────────────────────────────────────────────────────────────


class TestCoercion:
    @pytest.mark.parametrize(
        "value,expected",
        [(500, 500.0), ("12.5", 12.5), (None, 0.0), ("abc", 0.0), (float("nan"), 0.0)],
    )
    def test_to_amount(self, value, expected) -> None:
        assert to_amount(value) == expected

    def test_to_date_accepts_datetime_date_and_iso_strings(self) -> None:
        assert to_date(FIXED_NOW) == TODAY
        assert to_date(TODAY) == TODAY
        assert to_date("2026-10-19") == TODAY
        assert to_date("2026-10-19T08:30:00Z") == TODAY
        assert to_date("not a date") is None
        assert to_date(None) is None

    def test_offset_strings_are_reduced_in_utc(self) -> None:
        """Late evening in São Paulo (-03:00) is already the next UTC day."""
        assert to_date("2026-10-19T22:30:00-03:00") == date(2026, 10, 20)
        assert to_date("2026-10-19T20:59:00-03:00") == TODAY

    def test_aware_datetimes_are_reduced_in_utc(self) -> None:
        sao_paulo = timezone(timedelta(hours=-3))
        assert to_date(datetime(2026, 10, 18, 23, 0, tzinfo=sao_paulo)) == TODAY
        assert to_date(datetime(2026, 10, 19, 1, 0)) == TODAY  # naive taken as UTC


class TestDateWindows:
    """Expiring includes today; overdue is strictly before today."""

    def test_due_today_is_expiring_not_overdue(self) -> None:
        assert is_expiring(FIXED_NOW, TODAY)
        assert not is_overdue(FIXED_NOW, TODAY)

    def test_yesterday_is_overdue(self) -> None:
        assert is_overdue(days_from_now(-1), TODAY)
        assert not is_expiring(days_from_now(-1), TODAY)

    def test_window_boundary(self) -> None:
        assert is_expiring(days_from_now(30), TODAY)
        assert not is_expiring(days_from_now(31), TODAY)

    def test_missing_date_is_neither(self) -> None:
        assert not is_overdue(None, TODAY)
        assert not is_expiring(None, TODAY)

    def test_offset_due_date_compared_on_utc_day(self) -> None:
        # 2026-10-18 22:00 at -03:00 is 2026-10-19 01:00 UTC: due today, not overdue
        assert not is_overdue("2026-10-18T22:00:00-03:00", TODAY)
        assert is_expiring("2026-10-18T22:00:00-03:00", TODAY)


# ── Finance ──────────────────────────────────────────────────────────────


class TestFinanceExtractors:
    def test_overdue_payments_count_and_total(self) -> None:
        rows = [
            expense(500, due_in_days=-1),
            expense(250, due_in_days=-40),
            expense(100, due_in_days=0),  # due today: not overdue
            expense(900, status="pago", due_in_days=-5),
            income(300),
        ]
        assert count_overdue_payments(rows, TODAY) == (2, 750.0)

    def test_overdue_ignores_rows_without_due_date(self) -> None:
        assert count_overdue_payments([expense(500)], TODAY) == (0, 0.0)

    def test_cash_flow_uses_paid_rows_only(self) -> None:
        rows = [income(1000), income(200, status="pendente"), expense(400, status="confirmado")]
        assert sum_cash_flow(rows) == (1000.0, 400.0)

    def test_budgets_sum_and_tolerate_bad_values(self) -> None:
        rows = [
            Row(planned_amount=1000, spent_amount=800),
            Row(planned_amount="500", spent_amount=None),
            Row(planned_amount="oops", spent_amount=-10),
        ]
        assert sum_budgets(rows) == (1500.0, 800.0)


# ── Maintenance / contracts / policies / documents ───────────────────────


class TestOperationalExtractors:
    def test_maintenance_counts(self) -> None:
        rows = [
            request("concluído"),
            request("concluido"),
            request("aberto", "urgente"),
            request("em andamento", "urgente"),
            request("aberto"),
            request("concluído", "urgente"),  # completed urgent is not urgent
        ]
        assert count_maintenance_requests(rows) == (6, 3, 3, 2)

    def test_contract_states(self) -> None:
        rows = [
            contract("ativo", 365),
            contract("ativo", 10),  # expiring
            contract("ativo", 0),  # ends today: expiring
            contract("ativo", -1),  # expired by date
            contract("vencido", 100),  # expired by status
            contract("encerrado", -50),  # closed: neither
        ]
        assert count_contracts(rows, TODAY) == (6, 3, 2, 2)

    def test_policies_expired_coverage(self) -> None:
        rows = [
            policy(10000, -3),
            policy(5000, -1),
            policy(7000, 15),
            policy(9000, -10, status="cancelado"),
        ]
        assert count_policies(rows, TODAY) == (4, 2, 1, 15000.0)

    def test_document_expiry(self) -> None:
        rows = [document(-1), document(0), document(29), document(60), document(None)]
        assert count_document_expiry(rows, TODAY) == (5, 1, 2)


# ── Compliance / governance ──────────────────────────────────────────────


class TestGovernanceExtractors:
    def test_checklist_pending_and_overdue(self) -> None:
        rows = [
            checklist_item("em_dia", -10),  # up to date wins
            checklist_item("pendente", 5),
            checklist_item("pendente", -2),  # past due → overdue
            checklist_item("vencido"),
            checklist_item("pendente"),
        ]
        assert count_checklist_items(rows, TODAY) == (5, 2, 2)

    def test_decisions_recent_window(self) -> None:
        rows = [decision("aprovada", 10), decision("rejeitada", 89), decision("aprovada", 91)]
        assert count_decisions(rows, TODAY, recent_days=90) == (3, 2, 2)

    def test_published_minutes(self) -> None:
        assert count_published_minutes([minutes(), minutes("rascunho"), minutes()]) == 2


class TestExtractMetrics:
    def test_empty_dataset_is_all_zero(self) -> None:
        m = extract_metrics(CondominiumDataset(), FIXED_NOW)
        assert m.transactions_total == 0
        assert m.overdue_payments == 0
        assert m.requests_total == 0
        assert not m.has_equipment
        assert not m.has_documentation
        assert not m.has_suppliers

    def test_snapshot_combines_extractors(self) -> None:
        ds = CondominiumDataset(
            transactions=[expense(500, due_in_days=-1), income(800)],
            documents=[document(None) for _ in range(6)],
            equipment=[Row()],
            announcements=[announcement(5), announcement(45)],
            meeting_minutes=[minutes(), minutes("rascunho")],
        )
        m = extract_metrics(ds, FIXED_NOW)
        assert m.transactions_total == 2
        assert (m.overdue_payments, m.overdue_amount) == (1, 500.0)
        assert m.income_total == 800.0
        assert m.has_documentation
        assert m.has_equipment
        assert m.announcements_recent == 1
        assert (m.minutes_total, m.minutes_published) == (2, 1)

    def test_accepts_mapping_rows(self) -> None:
        ds = CondominiumDataset(
            transactions=[
                {"type": "despesa", "status": "pendente", "amount": "120.5", "due_date": "2026-10-01"}
            ]
        )
        m = extract_metrics(ds, FIXED_NOW)
        assert m.overdue_payments == 1
        assert m.overdue_amount == 120.5

    def test_accepts_plain_date_as_now(self) -> None:
        ds = CondominiumDataset(documents=[document(-1)])
        assert extract_metrics(ds, date(2026, 10, 19)).documents_expired == 1

    def test_offset_expiration_counted_on_utc_day(self) -> None:
        ds = CondominiumDataset(documents=[{"expiration_date": "2026-10-18T22:00:00-03:00"}])
        m = extract_metrics(ds, FIXED_NOW)
        assert (m.documents_expired, m.documents_expiring) == (0, 1)
