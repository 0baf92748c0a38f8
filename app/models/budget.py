"""Budget model: planned vs. spent per category."""

from __future__ import annotations

import uuid

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class Budget(Base):
    __tablename__ = "budgets"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    condominium_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    period: Mapped[str | None] = mapped_column(String(16), nullable=True)  # e.g. 2026-10
    planned_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    spent_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
