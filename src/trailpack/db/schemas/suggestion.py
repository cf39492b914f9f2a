"""SQLAlchemy ORM model for the trip_packing_suggestions table."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trailpack.db.schemas.base import Base, utcnow

if TYPE_CHECKING:
    from trailpack.db.schemas.trip import Trip


class SuggestionState(Base):
    __tablename__ = "trip_packing_suggestions"

    trip_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("trips.id", ondelete="CASCADE"), primary_key=True
    )
    library_item_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    trip: Mapped["Trip"] = relationship(back_populates="suggestions")

    __table_args__ = (CheckConstraint("status IN ('new', 'added', 'dismissed')", name="chk_suggestions_status"),)
