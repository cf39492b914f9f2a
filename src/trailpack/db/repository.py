"""Per-trip reads and writes over a SQLAlchemy session.

The repository never commits. Callers own the transaction so that paired
writes (items + marker, item + suggestion record) land together or not at all.
"""

import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from trailpack.db.schemas.packing_item import PackingItem
from trailpack.db.schemas.suggestion import SuggestionState
from trailpack.db.schemas.trip import Trip
from trailpack.errors import ErrorCode, NotFoundError


class PackingRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    # ── Trips ────────────────────────────────────────────────────────────────

    def get_trip(self, trip_id: str, *, for_update: bool = False) -> Trip:
        stmt = select(Trip).where(Trip.id == trip_id)
        if for_update:
            stmt = stmt.with_for_update()
        trip = self._session.scalars(stmt).one_or_none()
        if trip is None:
            raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
        return trip

    def set_marker(self, trip: Trip, *, initialized: bool, version: int | None) -> None:
        trip.packing_list_initialized = initialized
        trip.packing_list_version = version
        self._session.flush()

    # ── Packing items ────────────────────────────────────────────────────────

    def list_items(self, trip_id: str) -> list[PackingItem]:
        stmt = select(PackingItem).where(PackingItem.trip_id == trip_id).order_by(PackingItem.created_at, PackingItem.name)
        return list(self._session.scalars(stmt))

    def count_items(self, trip_id: str) -> int:
        stmt = select(func.count()).select_from(PackingItem).where(PackingItem.trip_id == trip_id)
        return self._session.scalar(stmt) or 0

    def get_item(self, trip_id: str, item_id: str) -> PackingItem:
        stmt = select(PackingItem).where(PackingItem.trip_id == trip_id, PackingItem.id == item_id)
        item = self._session.scalars(stmt).one_or_none()
        if item is None:
            raise NotFoundError(f"Packing item {item_id} not found on trip {trip_id}", code=ErrorCode.ITEM_NOT_FOUND)
        return item

    def add_item(
        self,
        trip_id: str,
        *,
        name: str,
        category_id: str,
        qty: int,
        source: str,
        library_item_id: str | None = None,
        added_reason: str | None = None,
    ) -> PackingItem:
        item = PackingItem(
            id=str(uuid.uuid4()),
            trip_id=trip_id,
            name=name,
            category_id=category_id,
            qty=qty,
            packed=False,
            source=source,
            library_item_id=library_item_id,
            added_reason=added_reason,
        )
        self._session.add(item)
        self._session.flush()
        return item

    def delete_item(self, item: PackingItem) -> None:
        self._session.delete(item)
        self._session.flush()

    def delete_all_items(self, trip_id: str) -> int:
        result = self._session.execute(delete(PackingItem).where(PackingItem.trip_id == trip_id))
        return result.rowcount or 0

    # ── Suggestion records ───────────────────────────────────────────────────

    def list_suggestion_states(self, trip_id: str) -> list[SuggestionState]:
        stmt = select(SuggestionState).where(SuggestionState.trip_id == trip_id)
        return list(self._session.scalars(stmt))

    def get_suggestion_state(self, trip_id: str, library_item_id: str) -> SuggestionState | None:
        return self._session.get(SuggestionState, (trip_id, library_item_id))

    def set_suggestion_status(self, trip_id: str, library_item_id: str, status: str) -> SuggestionState:
        state = self.get_suggestion_state(trip_id, library_item_id)
        if state is None:
            state = SuggestionState(trip_id=trip_id, library_item_id=library_item_id, status=status)
            self._session.add(state)
        else:
            state.status = status
        self._session.flush()
        return state

    def delete_all_suggestions(self, trip_id: str) -> int:
        result = self._session.execute(delete(SuggestionState).where(SuggestionState.trip_id == trip_id))
        return result.rowcount or 0
