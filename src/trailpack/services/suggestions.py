"""
Context-aware suggestions and the accept/dismiss lifecycle.

compute_suggestions() is read-only. accept_suggestion() writes the new list
item and the "added" record in one transaction; dismiss_suggestion() only
writes the record.
"""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session, sessionmaker

from trailpack.catalog import Catalog, default_catalog
from trailpack.db.repository import PackingRepository
from trailpack.db.schemas.packing_item import PackingItem
from trailpack.errors import SuggestionStateError
from trailpack.models.catalog import LibraryItem, Precipitation, Season, TemperatureBand, Wind
from trailpack.models.context import TripContext, TripInputs
from trailpack.models.packing import (
    PackingItemSource,
    PackingSuggestion,
    SuggestionRecord,
    SuggestionsResult,
    SuggestionStatus,
    TripPackingItem,
)
from trailpack.services.context import resolve_trip_context
from trailpack.services.matcher import Matcher
from trailpack.weather import WeatherProvider

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 12
FALLBACK_REASON = "Recommended for this trip"


def suggestion_reason(item: LibraryItem, context: TripContext) -> str:
    """
    The single most relevant reason to show for a suggestion.

    Freezing and cold conditions come first, then season, precipitation and
    wind. The reason is recomputed from the item's tags and is not guaranteed
    to name the facet that actually matched.
    """
    tags = item.tags
    band = context.temperature_band
    if TemperatureBand.BELOW_FREEZING in tags.temperature_bands and band is TemperatureBand.BELOW_FREEZING:
        return "Freezing temperatures"
    if TemperatureBand.COLD in tags.temperature_bands and band in (TemperatureBand.COLD, TemperatureBand.BELOW_FREEZING):
        return "Cold weather"
    if Season.WINTER in tags.seasons and context.season is Season.WINTER:
        return "Winter camping"
    if Precipitation.SNOW in tags.precipitation and context.precipitation is Precipitation.SNOW:
        return "Snow expected"
    if Precipitation.RAIN in tags.precipitation and context.precipitation is Precipitation.RAIN:
        return "Rain expected"
    if Wind.WINDY in tags.wind and context.windy:
        return "Windy conditions"
    if TemperatureBand.HOT in tags.temperature_bands and band is TemperatureBand.HOT:
        return "Hot weather"
    return FALLBACK_REASON


def find_on_list(items: Iterable[PackingItem], library_item: LibraryItem) -> PackingItem | None:
    """The list row for a library item, matched by library id first, then case-insensitive name."""
    items = list(items)
    by_id = next((item for item in items if item.library_item_id == library_item.id), None)
    if by_id is not None:
        return by_id
    name = library_item.name.lower()
    return next((item for item in items if item.name.lower() == name), None)


class SuggestionManager:
    def __init__(
        self,
        session_factory: sessionmaker[Session],
        catalog: Catalog | None = None,
        weather: WeatherProvider | None = None,
        *,
        limit: int = MAX_SUGGESTIONS,
    ) -> None:
        self._session_factory = session_factory
        self._catalog = catalog or default_catalog()
        self._matcher = Matcher(self._catalog)
        self._weather = weather
        self._limit = limit

    def compute_suggestions(self, trip_id: str) -> SuggestionsResult:
        with self._session_factory() as session:
            repo = PackingRepository(session)
            trip = repo.get_trip(trip_id)
            context = resolve_trip_context(TripInputs.model_validate(trip), self._weather)

            items = repo.list_items(trip_id)
            present_ids = {item.library_item_id for item in items if item.library_item_id}
            present_names = {item.name.lower() for item in items}
            # Added and dismissed records are terminal
            handled_ids = {
                state.library_item_id
                for state in repo.list_suggestion_states(trip_id)
                if state.status != SuggestionStatus.NEW.value
            }

        candidates = [
            item
            for item in self._matcher.select_contextual_items(context)
            if item.id not in present_ids and item.name.lower() not in present_names and item.id not in handled_ids
        ]
        candidates.sort(key=lambda item: (-item.priority, item.name))

        suggestions = [
            PackingSuggestion.model_validate({**item.model_dump(), "reason": suggestion_reason(item, context)})
            for item in candidates[: self._limit]
        ]
        return SuggestionsResult(suggestions=suggestions, context=context)

    def accept_suggestion(self, trip_id: str, library_item_id: str, reason: str | None = None) -> TripPackingItem:
        """
        Add the library item to the trip and mark its suggestion as added, atomically.

        If the item is already on the list (by library id or name), no second row is
        written: the existing row is returned and the suggestion is recorded as added.
        """
        library_item = self._catalog.require_item(library_item_id)

        with self._session_factory.begin() as session:
            repo = PackingRepository(session)
            trip = repo.get_trip(trip_id, for_update=True)

            state = repo.get_suggestion_state(trip_id, library_item_id)
            if state is not None and state.status == SuggestionStatus.DISMISSED.value:
                raise SuggestionStateError(f"Suggestion {library_item_id} was dismissed for trip {trip_id}")

            existing = find_on_list(repo.list_items(trip_id), library_item)
            if existing is not None:
                if state is None or state.status != SuggestionStatus.ADDED.value:
                    repo.set_suggestion_status(trip_id, library_item_id, SuggestionStatus.ADDED.value)
                logger.info("Suggestion %s is already on trip %s as item %s", library_item_id, trip_id, existing.id)
                return TripPackingItem.model_validate(existing)

            if reason is None:
                context = resolve_trip_context(TripInputs.model_validate(trip), self._weather)
                reason = suggestion_reason(library_item, context)

            row = repo.add_item(
                trip_id,
                name=library_item.name,
                category_id=library_item.category_id,
                qty=library_item.default_qty,
                source=PackingItemSource.SUGGESTED.value,
                library_item_id=library_item.id,
                added_reason=reason,
            )
            repo.set_suggestion_status(trip_id, library_item_id, SuggestionStatus.ADDED.value)
            logger.info("Accepted suggestion %s (%s) for trip %s", library_item.name, library_item_id, trip_id)
            return TripPackingItem.model_validate(row)

    def dismiss_suggestion(self, trip_id: str, library_item_id: str) -> SuggestionRecord:
        """Record a dismissal. Items on the list cannot be dismissed; an accepted record is never overwritten."""
        library_item = self._catalog.require_item(library_item_id)

        with self._session_factory.begin() as session:
            repo = PackingRepository(session)
            repo.get_trip(trip_id, for_update=True)

            if find_on_list(repo.list_items(trip_id), library_item) is not None:
                raise SuggestionStateError(f"Suggestion {library_item_id} is already on trip {trip_id}")

            state = repo.get_suggestion_state(trip_id, library_item_id)
            if state is not None and state.status == SuggestionStatus.ADDED.value:
                logger.info("Suggestion %s was already accepted for trip %s, keeping record", library_item_id, trip_id)
                return SuggestionRecord.model_validate(state)

            state = repo.set_suggestion_status(trip_id, library_item_id, SuggestionStatus.DISMISSED.value)
            logger.info("Dismissed suggestion %s for trip %s", library_item_id, trip_id)
            return SuggestionRecord.model_validate(state)
