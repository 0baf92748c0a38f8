"""Alert rules for the executive dashboard.

Alerts are generated fresh on every pass; each rule is independent and
rules may co-occur. ``sort_alerts`` orders by severity (critico first) and
keeps insertion order between equal severities.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.services.executive.metrics import MetricSnapshot
from app.services.executive.scoring_constants import (
    IMPACT_PER_EXPIRED_CONTRACT,
    IMPACT_PER_EXPIRED_DOCUMENT,
    IMPACT_PER_EXPIRING_CONTRACT,
    IMPACT_PER_EXPIRING_DOCUMENT,
    IMPACT_PER_EXPIRING_POLICY,
    IMPACT_PER_OPEN_REQUEST,
    IMPACT_PER_URGENT_REQUEST,
    OPEN_REQUESTS_ALERT_COUNT,
    OPEN_REQUESTS_HIGH_COUNT,
    OVERDUE_PAYMENTS_HIGH_COUNT,
    PILLAR_COMPLIANCE,
    PILLAR_CONTRACTS,
    PILLAR_FINANCE,
    PILLAR_GOVERNANCE,
    PILLAR_MAINTENANCE,
    SEVERITY_CRITICAL,
    SEVERITY_HIGH,
    SEVERITY_LOW,
    SEVERITY_MEDIUM,
    SEVERITY_RANK,
)

CATEGORY_OVERDUE_PAYMENTS = "inadimplencia"
CATEGORY_MAINTENANCE_BACKLOG = "manutencao_pendente"
CATEGORY_URGENT_MAINTENANCE = "manutencao_urgente"
CATEGORY_EXPIRED_CONTRACTS = "contratos_vencidos"
CATEGORY_EXPIRING_CONTRACTS = "contratos_a_vencer"
CATEGORY_EXPIRED_DOCUMENTS = "documentos_vencidos"
CATEGORY_EXPIRING_DOCUMENTS = "documentos_a_vencer"
CATEGORY_EXPIRED_POLICIES = "seguros_vencidos"
CATEGORY_EXPIRING_POLICIES = "seguros_a_vencer"
CATEGORY_GOVERNANCE_INACTIVITY = "governanca_inativa"


@dataclass(frozen=True)
class Alert:
    id: str
    pillar: str
    category: str
    severity: str
    title: str
    description: str
    suggested_action: str
    financial_impact: float
    created_at: datetime


def format_brl(amount: float) -> str:
    """Format amount as Brazilian currency, e.g. 1234.5 → 'R$ 1.234,50'."""
    text = f"{amount:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {text}"


def _alert(
    pillar: str,
    category: str,
    severity: str,
    title: str,
    description: str,
    suggested_action: str,
    financial_impact: float,
    now: datetime,
) -> Alert:
    return Alert(
        id=f"{pillar}-{category}",
        pillar=pillar,
        category=category,
        severity=severity,
        title=title,
        description=description,
        suggested_action=suggested_action,
        financial_impact=round(float(financial_impact), 2),
        created_at=now,
    )


def _finance_alerts(m: MetricSnapshot, now: datetime) -> list[Alert]:
    if m.overdue_payments <= 0:
        return []
    severity = SEVERITY_HIGH if m.overdue_payments > OVERDUE_PAYMENTS_HIGH_COUNT else SEVERITY_MEDIUM
    return [
        _alert(
            PILLAR_FINANCE,
            CATEGORY_OVERDUE_PAYMENTS,
            severity,
            "Pagamentos em atraso",
            f"{m.overdue_payments} pagamento(s) vencido(s) somando {format_brl(m.overdue_amount)}.",
            "Revisar cobranças pendentes e acionar régua de cobrança.",
            m.overdue_amount,
            now,
        )
    ]


def _maintenance_alerts(m: MetricSnapshot, now: datetime) -> list[Alert]:
    alerts: list[Alert] = []
    if m.requests_open > OPEN_REQUESTS_ALERT_COUNT:
        severity = SEVERITY_HIGH if m.requests_open > OPEN_REQUESTS_HIGH_COUNT else SEVERITY_MEDIUM
        alerts.append(
            _alert(
                PILLAR_MAINTENANCE,
                CATEGORY_MAINTENANCE_BACKLOG,
                severity,
                "Chamados de manutenção acumulados",
                f"{m.requests_open} chamado(s) de manutenção em aberto.",
                "Priorizar o atendimento dos chamados e revisar a capacidade da equipe.",
                m.requests_open * IMPACT_PER_OPEN_REQUEST,
                now,
            )
        )
    if m.requests_urgent > 0:
        alerts.append(
            _alert(
                PILLAR_MAINTENANCE,
                CATEGORY_URGENT_MAINTENANCE,
                SEVERITY_HIGH,
                "Chamados urgentes em aberto",
                f"{m.requests_urgent} chamado(s) urgente(s) aguardando atendimento.",
                "Acionar fornecedor ou zelador imediatamente.",
                m.requests_urgent * IMPACT_PER_URGENT_REQUEST,
                now,
            )
        )
    return alerts


def _contract_alerts(m: MetricSnapshot, now: datetime) -> list[Alert]:
    alerts: list[Alert] = []
    if m.contracts_expired > 0:
        alerts.append(
            _alert(
                PILLAR_CONTRACTS,
                CATEGORY_EXPIRED_CONTRACTS,
                SEVERITY_HIGH,
                "Contratos vencidos",
                f"{m.contracts_expired} contrato(s) com vigência encerrada.",
                "Renovar ou substituir os contratos vencidos.",
                m.contracts_expired * IMPACT_PER_EXPIRED_CONTRACT,
                now,
            )
        )
    if m.contracts_expiring > 0:
        alerts.append(
            _alert(
                PILLAR_CONTRACTS,
                CATEGORY_EXPIRING_CONTRACTS,
                SEVERITY_MEDIUM,
                "Contratos a vencer",
                f"{m.contracts_expiring} contrato(s) vencem nos próximos dias.",
                "Iniciar a renegociação antes do vencimento.",
                m.contracts_expiring * IMPACT_PER_EXPIRING_CONTRACT,
                now,
            )
        )
    return alerts


def _compliance_alerts(m: MetricSnapshot, now: datetime) -> list[Alert]:
    alerts: list[Alert] = []
    if m.documents_expired > 0:
        alerts.append(
            _alert(
                PILLAR_COMPLIANCE,
                CATEGORY_EXPIRED_DOCUMENTS,
                SEVERITY_HIGH,
                "Documentos vencidos",
                f"{m.documents_expired} documento(s) com validade expirada.",
                "Providenciar a renovação dos documentos e certificados.",
                m.documents_expired * IMPACT_PER_EXPIRED_DOCUMENT,
                now,
            )
        )
    if m.documents_expiring > 0:
        alerts.append(
            _alert(
                PILLAR_COMPLIANCE,
                CATEGORY_EXPIRING_DOCUMENTS,
                SEVERITY_MEDIUM,
                "Documentos a vencer",
                f"{m.documents_expiring} documento(s) vencem nos próximos dias.",
                "Agendar a renovação antes do vencimento.",
                m.documents_expiring * IMPACT_PER_EXPIRING_DOCUMENT,
                now,
            )
        )
    if m.policies_expired > 0:
        alerts.append(
            _alert(
                PILLAR_COMPLIANCE,
                CATEGORY_EXPIRED_POLICIES,
                SEVERITY_CRITICAL,
                "Apólices de seguro vencidas",
                f"{m.policies_expired} apólice(s) vencida(s); cobertura exposta de "
                f"{format_brl(m.policies_expired_coverage)}.",
                "Contratar ou renovar o seguro imediatamente.",
                m.policies_expired_coverage,
                now,
            )
        )
    if m.policies_expiring > 0:
        alerts.append(
            _alert(
                PILLAR_COMPLIANCE,
                CATEGORY_EXPIRING_POLICIES,
                SEVERITY_HIGH,
                "Apólices de seguro a vencer",
                f"{m.policies_expiring} apólice(s) vencem nos próximos dias.",
                "Solicitar cotações de renovação à corretora.",
                m.policies_expiring * IMPACT_PER_EXPIRING_POLICY,
                now,
            )
        )
    return alerts


def _governance_alerts(m: MetricSnapshot, now: datetime) -> list[Alert]:
    if m.decisions_total == 0 or m.decisions_recent > 0:
        return []
    return [
        _alert(
            PILLAR_GOVERNANCE,
            CATEGORY_GOVERNANCE_INACTIVITY,
            SEVERITY_LOW,
            "Sem decisões recentes",
            "Nenhuma decisão registrada no período recente.",
            "Avaliar a convocação de assembleia ou reunião de conselho.",
            0,
            now,
        )
    ]


def generate_alerts(m: MetricSnapshot, now: datetime) -> list[Alert]:
    """Apply every alert rule to the snapshot; returns alerts in rule order (unsorted)."""
    return [
        *_finance_alerts(m, now),
        *_maintenance_alerts(m, now),
        *_contract_alerts(m, now),
        *_compliance_alerts(m, now),
        *_governance_alerts(m, now),
    ]


def sort_alerts(alerts: list[Alert]) -> list[Alert]:
    """Stable sort by severity: critico, alto, medio, baixo, info. Unknown severities last."""
    return sorted(alerts, key=lambda a: SEVERITY_RANK.get(a.severity, len(SEVERITY_RANK)))


def total_financial_impact(alerts: list[Alert]) -> float:
    return round(sum(a.financial_impact for a in alerts), 2)
