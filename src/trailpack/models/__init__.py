"""
Pydantic models for TrailPack.
"""

from trailpack.models.catalog import (
    CampingStyle,
    Category,
    ItemTags,
    LibraryItem,
    Precipitation,
    Season,
    TemperatureBand,
    Wind,
)
from trailpack.models.context import Forecast, TripContext, TripInputs
from trailpack.models.packing import (
    CategoryGroup,
    InitializationResult,
    PackingItemSource,
    PackingListState,
    PackingSuggestion,
    SuggestionRecord,
    SuggestionsResult,
    SuggestionStatus,
    TripPackingItem,
)

__all__ = [
    "CampingStyle",
    "Category",
    "CategoryGroup",
    "Forecast",
    "InitializationResult",
    "ItemTags",
    "LibraryItem",
    "PackingItemSource",
    "PackingListState",
    "PackingSuggestion",
    "Precipitation",
    "Season",
    "SuggestionRecord",
    "SuggestionStatus",
    "SuggestionsResult",
    "TemperatureBand",
    "TripContext",
    "TripInputs",
    "TripPackingItem",
    "Wind",
]
