"""Executive dashboard response schemas (GET /api/executive-dashboard)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PillarScoreRead(BaseModel):
    """One maturity pillar, score clamped to [20, 100]."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    label: str
    score: int = Field(..., ge=20, le=100)
    weight: int
    risk_level: str  # low | medium | high
    maturity: str  # beginner | evolving | structured | smart


class AlertRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    pillar: str
    category: str
    severity: str  # critico | alto | medio | baixo | info
    title: str
    description: str
    suggested_action: str
    financial_impact: float = Field(..., ge=0)
    created_at: datetime


class RiskDistribution(BaseModel):
    """Number of pillars at each risk level."""

    low: int = 0
    medium: int = 0
    high: int = 0


class ExecutiveSummaryResponse(BaseModel):
    """Response for GET /api/executive-dashboard."""

    model_config = ConfigDict(from_attributes=True)

    condominium_id: str | None = None
    generated_at: datetime
    overall_score: int
    maturity: str
    pillars: list[PillarScoreRead]
    alerts: list[AlertRead] = Field(default_factory=list)
    financial_impact: float
    risk_distribution: RiskDistribution
    metrics: dict[str, int] = Field(default_factory=dict)
