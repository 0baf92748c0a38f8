"""API routes."""

from app.api.executive import router as executive_router

__all__ = ["executive_router"]
