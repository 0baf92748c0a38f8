"""Pydantic schemas for request/response validation."""

from app.schemas.executive import (
    AlertRead,
    ExecutiveSummaryResponse,
    PillarScoreRead,
    RiskDistribution,
)

__all__ = [
    "AlertRead",
    "ExecutiveSummaryResponse",
    "PillarScoreRead",
    "RiskDistribution",
]
