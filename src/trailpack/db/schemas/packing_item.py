"""SQLAlchemy ORM model for the trip_packing_items table."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trailpack.db.schemas.base import Base, utcnow

if TYPE_CHECKING:
    from trailpack.db.schemas.trip import Trip


class PackingItem(Base):
    __tablename__ = "trip_packing_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    trip_id: Mapped[str] = mapped_column(String(64), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[str] = mapped_column(String(64), nullable=False)
    qty: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    packed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False)
    library_item_id: Mapped[str | None] = mapped_column(String(64))
    added_reason: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    trip: Mapped["Trip"] = relationship(back_populates="packing_items")

    __table_args__ = (
        CheckConstraint("qty >= 1", name="chk_packing_items_qty"),
        CheckConstraint("source IN ('base', 'suggested', 'user')", name="chk_packing_items_source"),
        Index("idx_packing_items_trip_id", "trip_id"),
    )
