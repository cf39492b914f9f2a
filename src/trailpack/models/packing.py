from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from trailpack.models.catalog import LibraryItem
from trailpack.models.context import TripContext


class PackingItemSource(str, Enum):
    BASE = "base"
    SUGGESTED = "suggested"
    USER = "user"


class SuggestionStatus(str, Enum):
    NEW = "new"
    ADDED = "added"
    DISMISSED = "dismissed"


class TripPackingItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    trip_id: str
    name: str
    category_id: str
    qty: int = Field(..., ge=1)
    packed: bool = False
    source: PackingItemSource
    library_item_id: str | None = None
    added_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SuggestionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    trip_id: str
    library_item_id: str
    status: SuggestionStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PackingSuggestion(LibraryItem):
    """A library item offered for a trip, with the reason shown to the user."""

    reason: str


class CategoryGroup(BaseModel):
    category_id: str
    label: str
    icon: str | None = None
    sort_order: int
    items: list[TripPackingItem]
    packed_count: int
    total_count: int


class PackingListState(BaseModel):
    trip_id: str
    is_initialized: bool
    version: int | None
    categories: list[CategoryGroup]
    total_items: int
    packed_items: int


class InitializationResult(BaseModel):
    trip_id: str
    initialized: bool
    item_count: int
    base_count: int = 0
    suggested_count: int = 0
    version: int


class SuggestionsResult(BaseModel):
    suggestions: list[PackingSuggestion]
    context: TripContext
