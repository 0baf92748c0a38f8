"""Executive dashboard API route."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_condominium_id, get_storage
from app.schemas.executive import ExecutiveSummaryResponse
from app.services.executive.dashboard_engine import build_executive_summary
from app.storage import DataFetchError, Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=ExecutiveSummaryResponse,
    summary="Get executive dashboard",
    description="""Score a condominium across seven maturity pillars.

Returns the overall weighted score (20..100), maturity label, per-pillar
scores with risk level, severity-sorted alerts (critico → info) and their
total estimated financial impact.

**Tenant**: ``condominium_id`` query parameter or ``X-Condominium-Id`` header.
Omitting both evaluates all rows.

**Errors**: any failed data fetch returns 500; no partial summary.
""",
)
async def api_executive_dashboard(
    condominium_id: str | None = Depends(get_condominium_id),
    storage: Storage = Depends(get_storage),
) -> ExecutiveSummaryResponse:
    """Compute the executive summary for one tenant."""
    try:
        summary = await build_executive_summary(storage, condominium_id)
    except DataFetchError as exc:
        logger.exception("Executive dashboard failed: condominium_id=%s", condominium_id)
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to compute executive summary", "details": str(exc)},
        ) from exc
    return ExecutiveSummaryResponse.model_validate(summary, from_attributes=True)
