"""Legal compliance checklist item (AVCB, inspections, licences)."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class LegalChecklistItem(Base):
    __tablename__ = "legal_checklist_items"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    condominium_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    item_type: Mapped[str] = mapped_column(String(32), nullable=False, default="documento")
    is_mandatory: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    frequency: Mapped[str] = mapped_column(String(16), nullable=False, default="anual")
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="pendente")
    last_completed_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    next_due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
