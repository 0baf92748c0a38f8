"""Meeting minutes (atas) model."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class MeetingMinutes(Base):
    """Minutes of an assembly or board meeting; only "publicada" counts as published."""

    __tablename__ = "meeting_minutes"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    condominium_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    meeting_type: Mapped[str] = mapped_column(String(32), nullable=False, default="assembleia")
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="rascunho")
    meeting_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    attendees_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    quorum_reached: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
