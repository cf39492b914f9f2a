"""SQLAlchemy ORM model for the trips table."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trailpack.db.schemas.base import Base, utcnow


class Trip(Base):
    __tablename__ = "trips"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    start_date: Mapped[date | None] = mapped_column(Date)
    latitude: Mapped[float | None] = mapped_column(Float)
    camping_style: Mapped[str | None] = mapped_column(String(50))
    location_name: Mapped[str | None] = mapped_column(String(255))
    packing_list_initialized: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    packing_list_version: Mapped[int | None] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    packing_items: Mapped[list["PackingItem"]] = relationship(
        back_populates="trip", cascade="all, delete-orphan", passive_deletes=True
    )
    suggestions: Mapped[list["SuggestionState"]] = relationship(
        back_populates="trip", cascade="all, delete-orphan", passive_deletes=True
    )


# Avoid circular import — resolved by string reference above
from trailpack.db.schemas.packing_item import PackingItem  # noqa: E402, F401
from trailpack.db.schemas.suggestion import SuggestionState  # noqa: E402, F401
