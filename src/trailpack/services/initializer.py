"""
Packing list initialization.

A trip's list is in sync with the catalog only when the trip is marked
initialized, carries the current catalog version and has at least one item.
Initialization writes the items and the marker in one transaction so a
half-written list (items without marker, or marker without items) can never
be committed.
"""

import logging

from sqlalchemy.orm import Session, sessionmaker

from trailpack.catalog import Catalog, default_catalog
from trailpack.db.repository import PackingRepository
from trailpack.db.schemas.trip import Trip
from trailpack.errors import PersistenceError
from trailpack.models.catalog import Precipitation, Season, TemperatureBand
from trailpack.models.context import TripContext, TripInputs
from trailpack.models.packing import InitializationResult, PackingItemSource
from trailpack.services.context import resolve_trip_context
from trailpack.services.matcher import Matcher
from trailpack.weather import WeatherProvider

logger = logging.getLogger(__name__)

INITIAL_SUGGESTION_MIN_PRIORITY = 4
MAX_ADDED_REASONS = 2


def build_added_reason(context: TripContext) -> str:
    """Short label for why suggested items were added, e.g. "Winter, Freezing temps"."""
    reasons: list[str] = []
    if context.season is Season.WINTER:
        reasons.append("Winter")
    if context.temperature_band is TemperatureBand.BELOW_FREEZING:
        reasons.append("Freezing temps")
    elif context.temperature_band is TemperatureBand.COLD:
        reasons.append("Cold weather")
    elif context.temperature_band is TemperatureBand.HOT:
        reasons.append("Hot weather")
    if context.windy:
        reasons.append("Windy")
    if context.precipitation is Precipitation.SNOW:
        reasons.append("Snow")
    elif context.precipitation is Precipitation.RAIN:
        reasons.append("Rain")
    return ", ".join(reasons[:MAX_ADDED_REASONS]) or "Recommended"


def list_needs_initialization(repo: PackingRepository, trip: Trip, version: int) -> bool:
    if not trip.packing_list_initialized:
        return True
    if trip.packing_list_version != version:
        return True
    return repo.count_items(trip.id) == 0


class ListInitializer:
    def __init__(
        self,
        session_factory: sessionmaker[Session],
        catalog: Catalog | None = None,
        weather: WeatherProvider | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._catalog = catalog or default_catalog()
        self._matcher = Matcher(self._catalog)
        self._weather = weather

    @property
    def version(self) -> int:
        return self._catalog.version

    def needs_initialization(self, trip_id: str) -> bool:
        with self._session_factory() as session:
            repo = PackingRepository(session)
            return list_needs_initialization(repo, repo.get_trip(trip_id), self.version)

    def initialize_list(self, trip_id: str) -> InitializationResult:
        """Populate the list once per catalog version. A second call on an in-sync list is a no-op."""
        with self._session_factory.begin() as session:
            repo = PackingRepository(session)
            trip = repo.get_trip(trip_id, for_update=True)
            return self._populate(repo, trip)

    def force_reinitialize(self, trip_id: str) -> InitializationResult:
        """Delete every item and suggestion record for the trip, then rebuild the list."""
        with self._session_factory.begin() as session:
            repo = PackingRepository(session)
            trip = repo.get_trip(trip_id, for_update=True)
            deleted_items = repo.delete_all_items(trip_id)
            deleted_records = repo.delete_all_suggestions(trip_id)
            repo.set_marker(trip, initialized=False, version=None)
            logger.info(
                "Reset packing list for trip %s: %d items, %d suggestion records removed",
                trip_id,
                deleted_items,
                deleted_records,
            )
            return self._populate(repo, trip)

    def _populate(self, repo: PackingRepository, trip: Trip) -> InitializationResult:
        if not list_needs_initialization(repo, trip, self.version):
            logger.info("Packing list for trip %s already at version %d", trip.id, self.version)
            return InitializationResult(
                trip_id=trip.id,
                initialized=False,
                item_count=repo.count_items(trip.id),
                version=self.version,
            )

        context = resolve_trip_context(TripInputs.model_validate(trip), self._weather)
        selected = self._matcher.select_initial_items(context, INITIAL_SUGGESTION_MIN_PRIORITY)

        existing = repo.list_items(trip.id)
        existing_ids = {item.library_item_id for item in existing if item.library_item_id}
        existing_names = {item.name.lower() for item in existing}

        reason = build_added_reason(context)
        base_count = suggested_count = 0
        for library_item in selected:
            if library_item.id in existing_ids or library_item.name.lower() in existing_names:
                continue
            source = PackingItemSource.BASE if library_item.is_base else PackingItemSource.SUGGESTED
            repo.add_item(
                trip.id,
                name=library_item.name,
                category_id=library_item.category_id,
                qty=library_item.default_qty,
                source=source.value,
                library_item_id=library_item.id,
                added_reason=None if library_item.is_base else reason,
            )
            if library_item.is_base:
                base_count += 1
            else:
                suggested_count += 1

        if not existing and base_count + suggested_count == 0:
            raise PersistenceError(f"Initialization for trip {trip.id} selected no items; marker not written")

        repo.set_marker(trip, initialized=True, version=self.version)
        logger.info(
            "Initialized packing list for trip %s at version %d: %d base + %d suggested",
            trip.id,
            self.version,
            base_count,
            suggested_count,
        )
        return InitializationResult(
            trip_id=trip.id,
            initialized=True,
            item_count=base_count + suggested_count,
            base_count=base_count,
            suggested_count=suggested_count,
            version=self.version,
        )
