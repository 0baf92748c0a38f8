"""Tests for the executive dashboard engine."""

from __future__ import annotations

import asyncio

from app.services.executive.dashboard_engine import (
    build_executive_summary,
    compute_executive_summary,
    risk_distribution,
)
from app.services.executive.dataset_loader import CondominiumDataset
from app.services.executive.pillars import PillarScore
from app.storage import MemoryStorage
from tests.row_factories import (
    Row,
    contract,
    decision,
    document,
    expense,
    income,
    policy,
    request,
)
from tests.test_constants import FIXED_NOW, OTHER_CONDOMINIUM_ID, TEST_CONDOMINIUM_ID


class TestEmptyTenant:
    def test_overall_47_evolving(self) -> None:
        summary = compute_executive_summary(CondominiumDataset(), FIXED_NOW)
        assert summary.overall_score == 47
        assert summary.maturity == "evolving"
        assert summary.alerts == []
        assert summary.financial_impact == 0
        assert summary.generated_at == FIXED_NOW

    def test_risk_distribution_for_empty_tenant(self) -> None:
        summary = compute_executive_summary(CondominiumDataset(), FIXED_NOW)
        # 50 50 20 30 100 40 30
        assert summary.risk_distribution == {"low": 1, "medium": 3, "high": 3}
        assert sum(summary.risk_distribution.values()) == 7


class TestWorkedExamples:
    def test_single_overdue_payment(self) -> None:
        ds = CondominiumDataset(transactions=[expense(500, due_in_days=-1)])
        summary = compute_executive_summary(ds, FIXED_NOW, condominium_id=TEST_CONDOMINIUM_ID)
        assert summary.condominium_id == TEST_CONDOMINIUM_ID
        assert len(summary.alerts) == 1
        assert summary.alerts[0].severity == "medio"
        assert summary.financial_impact == 500
        assert summary.metrics["overdue_payments"] == 1

    def test_expired_policies_dominate_alert_order(self) -> None:
        ds = CondominiumDataset(
            insurance_policies=[policy(10000, -5) for _ in range(6)],
            transactions=[expense(100, due_in_days=-2)],
        )
        summary = compute_executive_summary(ds, FIXED_NOW)
        assert summary.alerts[0].severity == "critico"
        assert summary.alerts[0].financial_impact == 60000
        assert summary.financial_impact == 60100

    def test_alerts_sorted_and_impact_summed(self) -> None:
        ds = CondominiumDataset(
            transactions=[expense(300, due_in_days=-3), income(1000)],
            contracts=[contract("ativo", -1), contract("ativo", 5)],
            maintenance_requests=[request("aberto", "urgente")],
            documents=[document(-2), document(10)],
            decisions=[decision("aprovada", 200)],
        )
        summary = compute_executive_summary(ds, FIXED_NOW)
        severities = [a.severity for a in summary.alerts]
        ranks = {"critico": 0, "alto": 1, "medio": 2, "baixo": 3, "info": 4}
        assert severities == sorted(severities, key=ranks.__getitem__)
        assert summary.financial_impact == sum(a.financial_impact for a in summary.alerts)
        assert severities[-1] == "baixo"


class TestBounds:
    def test_scores_bounded_for_hostile_input(self) -> None:
        ds = CondominiumDataset(
            transactions=[expense(1e9, due_in_days=-1) for _ in range(50)],
            budgets=[Row(planned_amount=1, spent_amount=1e9)],
            contracts=[contract("vencido") for _ in range(20)],
            maintenance_requests=[request("aberto", "urgente") for _ in range(40)],
            documents=[document(-1) for _ in range(30)],
        )
        summary = compute_executive_summary(ds, FIXED_NOW)
        assert 20 <= summary.overall_score <= 100
        for p in summary.pillars:
            assert 20 <= p.score <= 100

    def test_risk_distribution_counts_every_level(self) -> None:
        pillars = [PillarScore(name="a", label="A", score=90, weight=100)]
        assert risk_distribution(pillars) == {"low": 1, "medium": 0, "high": 0}


class TestBuildExecutiveSummary:
    def test_reads_only_requested_tenant(self) -> None:
        storage = MemoryStorage()
        storage.add(
            "financial_transactions",
            {"condominium_id": TEST_CONDOMINIUM_ID, "type": "despesa", "status": "pendente",
             "amount": 500, "due_date": "2026-10-18"},
        )
        storage.add(
            "financial_transactions",
            {"condominium_id": OTHER_CONDOMINIUM_ID, "type": "despesa", "status": "pendente",
             "amount": 9000, "due_date": "2026-10-01"},
        )

        summary = asyncio.run(build_executive_summary(storage, TEST_CONDOMINIUM_ID, now=FIXED_NOW))

        assert summary.condominium_id == TEST_CONDOMINIUM_ID
        assert summary.financial_impact == 500
        assert summary.metrics["transactions"] == 1

    def test_defaults_now_to_current_time(self) -> None:
        summary = asyncio.run(build_executive_summary(MemoryStorage(), None))
        assert summary.generated_at.tzinfo is not None
        assert summary.overall_score == 47
