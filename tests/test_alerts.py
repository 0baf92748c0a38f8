"""Tests for executive dashboard alert rules."""

from __future__ import annotations

import pytest

from app.services.executive.alerts import (
    Alert,
    format_brl,
    generate_alerts,
    sort_alerts,
    total_financial_impact,
)
from app.services.executive.metrics import MetricSnapshot
from tests.test_constants import FIXED_NOW


def _by_category(alerts: list[Alert]) -> dict[str, Alert]:
    return {a.category: a for a in alerts}


def _alert(severity: str, category: str) -> Alert:
    return Alert(
        id=f"finance-{category}",
        pillar="finance",
        category=category,
        severity=severity,
        title="t",
        description="d",
        suggested_action="a",
        financial_impact=0.0,
        created_at=FIXED_NOW,
    )


class TestFormatBrl:
    def test_thousands_and_decimals(self) -> None:
        assert format_brl(1234.5) == "R$ 1.234,50"
        assert format_brl(0) == "R$ 0,00"
        assert format_brl(1_000_000) == "R$ 1.000.000,00"


class TestRules:
    def test_no_alerts_for_empty_snapshot(self) -> None:
        assert generate_alerts(MetricSnapshot(), FIXED_NOW) == []

    def test_single_overdue_payment_is_medio(self) -> None:
        m = MetricSnapshot(transactions_total=1, overdue_payments=1, overdue_amount=500)
        alerts = generate_alerts(m, FIXED_NOW)
        assert len(alerts) == 1
        a = alerts[0]
        assert a.pillar == "finance"
        assert a.severity == "medio"
        assert a.financial_impact == 500
        assert a.id == "finance-inadimplencia"
        assert a.created_at == FIXED_NOW
        assert "R$ 500,00" in a.description

    def test_many_overdue_payments_is_alto(self) -> None:
        m = MetricSnapshot(overdue_payments=6, overdue_amount=3000)
        assert generate_alerts(m, FIXED_NOW)[0].severity == "alto"

    @pytest.mark.parametrize("open_count,expected", [(5, None), (6, "medio"), (15, "medio"), (16, "alto")])
    def test_maintenance_backlog_thresholds(self, open_count, expected) -> None:
        alerts = _by_category(generate_alerts(MetricSnapshot(requests_open=open_count), FIXED_NOW))
        backlog = alerts.get("manutencao_pendente")
        if expected is None:
            assert backlog is None
        else:
            assert backlog.severity == expected
            assert backlog.financial_impact == open_count * 200

    def test_urgent_requests(self) -> None:
        alerts = _by_category(generate_alerts(MetricSnapshot(requests_urgent=3), FIXED_NOW))
        urgent = alerts["manutencao_urgente"]
        assert urgent.severity == "alto"
        assert urgent.financial_impact == 3000

    def test_contracts_expired_and_expiring(self) -> None:
        m = MetricSnapshot(contracts_total=3, contracts_expired=2, contracts_expiring=1)
        alerts = _by_category(generate_alerts(m, FIXED_NOW))
        assert alerts["contratos_vencidos"].severity == "alto"
        assert alerts["contratos_vencidos"].financial_impact == 4000
        assert alerts["contratos_a_vencer"].severity == "medio"
        assert alerts["contratos_a_vencer"].financial_impact == 1000

    def test_documents_expired_and_expiring(self) -> None:
        m = MetricSnapshot(documents_total=4, documents_expired=1, documents_expiring=2)
        alerts = _by_category(generate_alerts(m, FIXED_NOW))
        assert alerts["documentos_vencidos"].financial_impact == 1000
        assert alerts["documentos_a_vencer"].financial_impact == 1000
        assert alerts["documentos_a_vencer"].severity == "medio"

    def test_expired_policies_are_critico_with_coverage_impact(self) -> None:
        m = MetricSnapshot(policies_total=6, policies_expired=6, policies_expired_coverage=60000)
        alerts = generate_alerts(m, FIXED_NOW)
        assert len(alerts) == 1
        assert alerts[0].severity == "critico"
        assert alerts[0].financial_impact == 60000

    def test_expiring_policies(self) -> None:
        m = MetricSnapshot(policies_total=2, policies_expiring=2)
        alerts = _by_category(generate_alerts(m, FIXED_NOW))
        assert alerts["seguros_a_vencer"].severity == "alto"
        assert alerts["seguros_a_vencer"].financial_impact == 2000

    def test_governance_inactivity_only_with_stale_decisions(self) -> None:
        assert generate_alerts(MetricSnapshot(decisions_total=3, decisions_recent=1), FIXED_NOW) == []
        alerts = generate_alerts(MetricSnapshot(decisions_total=3), FIXED_NOW)
        assert [a.category for a in alerts] == ["governanca_inativa"]
        assert alerts[0].severity == "baixo"
        assert alerts[0].financial_impact == 0


class TestSortAndImpact:
    def test_sorted_by_severity(self) -> None:
        alerts = sort_alerts(
            [_alert("baixo", "a"), _alert("critico", "b"), _alert("medio", "c"), _alert("alto", "d")]
        )
        assert [a.severity for a in alerts] == ["critico", "alto", "medio", "baixo"]

    def test_sort_is_stable_for_equal_severity(self) -> None:
        alerts = sort_alerts([_alert("alto", "x"), _alert("medio", "y"), _alert("alto", "z")])
        assert [a.category for a in alerts] == ["x", "z", "y"]

    def test_total_impact_sums_all_alerts(self) -> None:
        m = MetricSnapshot(
            overdue_payments=1,
            overdue_amount=500,
            requests_urgent=1,
            contracts_expired=1,
            policies_expired=1,
            policies_expired_coverage=10000,
        )
        alerts = generate_alerts(m, FIXED_NOW)
        assert total_financial_impact(alerts) == 500 + 1000 + 2000 + 10000

    def test_total_impact_empty(self) -> None:
        assert total_financial_impact([]) == 0
