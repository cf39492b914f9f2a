from datetime import date

import pytest
from pydantic import ValidationError

from trailpack.catalog import build_item
from trailpack.models import (
    CampingStyle,
    Forecast,
    ItemTags,
    LibraryItem,
    PackingSuggestion,
    Season,
    TemperatureBand,
    TripContext,
    TripInputs,
    TripPackingItem,
)
from trailpack.models.requests import AcceptSuggestionRequest, AddCustomItemRequest, UpdateItemRequest

VALID_ITEM = dict(
    id="11111111-2222-3333-4444-555555555555",
    name="Headlamp",
    category_id="navigation_and_safety",
    default_qty=1,
    priority=5,
    notes=None,
    tags=ItemTags(base=True),
)

VALID_PACKING_ITEM = dict(
    id="item-1",
    trip_id="trip-1",
    name="Headlamp",
    category_id="navigation_and_safety",
    qty=1,
    packed=False,
    source="base",
)


# --- ItemTags / LibraryItem ---


def test_item_tags_default_to_wildcard():
    tags = ItemTags()
    assert tags.seasons == frozenset({Season.ANY})
    assert tags.camping_styles == frozenset({CampingStyle.ANY})
    assert tags.base is False


def test_item_tags_coerce_string_values():
    tags = ItemTags(temperature_bands=["belowFreezing", "cold"])
    assert tags.temperature_bands == frozenset({TemperatureBand.BELOW_FREEZING, TemperatureBand.COLD})


def test_library_item_valid():
    item = LibraryItem(**VALID_ITEM)
    assert item.is_base is True
    assert item.pro_only is False


@pytest.mark.parametrize("priority", [0, 6])
def test_library_item_priority_out_of_range(priority):
    with pytest.raises(ValidationError):
        LibraryItem(**{**VALID_ITEM, "priority": priority})


def test_library_item_default_qty_must_be_positive():
    with pytest.raises(ValidationError):
        LibraryItem(**{**VALID_ITEM, "default_qty": 0})


def test_library_item_is_frozen():
    item = LibraryItem(**VALID_ITEM)
    with pytest.raises(ValidationError):
        item.priority = 1  # type: ignore[misc]


def test_packing_suggestion_carries_item_fields_and_reason():
    item = build_item("Gaiters", "footwear", 4, ItemTags(seasons=frozenset({Season.WINTER})))
    suggestion = PackingSuggestion.model_validate({**item.model_dump(), "reason": "Winter camping"})
    assert suggestion.id == item.id
    assert suggestion.reason == "Winter camping"


# --- TripInputs / Forecast / TripContext ---


def test_trip_inputs_all_optional():
    trip = TripInputs()
    assert trip.start_date is None
    assert trip.latitude is None


@pytest.mark.parametrize("latitude", [-90.5, 91.0])
def test_trip_inputs_latitude_out_of_range(latitude):
    with pytest.raises(ValidationError):
        TripInputs(start_date=date(2027, 1, 1), latitude=latitude)


def test_forecast_precip_probability_bounds():
    with pytest.raises(ValidationError):
        Forecast(precip_probability=120)


def test_forecast_negative_wind_rejected():
    with pytest.raises(ValidationError):
        Forecast(avg_wind_mph=-1)


def test_trip_context_serializes_enum_values():
    context = TripContext(season=Season.WINTER, temperature_band=TemperatureBand.BELOW_FREEZING)
    dumped = context.model_dump(mode="json")
    assert dumped["season"] == "winter"
    assert dumped["temperature_band"] == "belowFreezing"
    assert dumped["precipitation"] == "none"
    assert dumped["camping_style"] == "any"


# --- TripPackingItem ---


def test_packing_item_valid():
    item = TripPackingItem(**VALID_PACKING_ITEM)
    assert item.model_dump(mode="json")["source"] == "base"


def test_packing_item_qty_must_be_positive():
    with pytest.raises(ValidationError):
        TripPackingItem(**{**VALID_PACKING_ITEM, "qty": 0})


def test_packing_item_invalid_source():
    with pytest.raises(ValidationError):
        TripPackingItem(**{**VALID_PACKING_ITEM, "source": "imported"})


# --- Requests ---


def test_add_custom_item_request_defaults():
    request = AddCustomItemRequest.model_validate_json('{"name": "Kite"}')
    assert request.category is None
    assert request.qty == 1


def test_update_item_request_empty():
    update = UpdateItemRequest.model_validate_json("{}")
    assert update.qty is None and update.packed is None and update.toggle is False


def test_accept_request_requires_library_item_id():
    with pytest.raises(ValidationError):
        AcceptSuggestionRequest.model_validate_json('{"library_item_id": ""}')
