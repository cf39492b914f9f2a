import pytest

from trailpack.catalog import FALLBACK_CATEGORY_ID
from trailpack.errors import ErrorCode, NotFoundError, ValidationError
from trailpack.models import PackingItemSource, TripPackingItem
from trailpack.services import ListInitializer, PackingListMutator, group_items_by_category
from trailpack.services.items import UNKNOWN_CATEGORY_ORDER


def _item(name, category_id, packed=False):
    return TripPackingItem(
        id=f"id-{name}", trip_id="trip-1", name=name, category_id=category_id, qty=1, packed=packed, source="user"
    )


@pytest.fixture
def mutator(session_factory):
    return PackingListMutator(session_factory)


@pytest.fixture
def trip_id(make_trip):
    return make_trip()


# --- add_custom_item ---


def test_add_custom_item(mutator, trip_id):
    item = mutator.add_custom_item(trip_id, "  Fishing rod  ", "Tools", qty=2)

    assert item.name == "Fishing rod"
    assert item.category_id == "tools"
    assert item.qty == 2
    assert item.packed is False
    assert item.source == PackingItemSource.USER
    assert item.library_item_id is None
    assert item.added_reason is None
    assert [i.id for i in mutator.list_items(trip_id)] == [item.id]


def test_add_custom_item_unknown_category_uses_fallback(mutator, trip_id):
    assert mutator.add_custom_item(trip_id, "Kite", "Toys").category_id == FALLBACK_CATEGORY_ID
    assert mutator.add_custom_item(trip_id, "Frisbee").category_id == FALLBACK_CATEGORY_ID


def test_add_custom_item_legacy_category_alias(mutator, trip_id):
    assert mutator.add_custom_item(trip_id, "Spare lighter", "Food & Kitchen").category_id == "kitchen"


@pytest.mark.parametrize("name", ["", "   "])
def test_add_custom_item_empty_name(mutator, trip_id, name):
    with pytest.raises(ValidationError) as exc_info:
        mutator.add_custom_item(trip_id, name)
    assert exc_info.value.code == ErrorCode.EMPTY_ITEM_NAME


@pytest.mark.parametrize("qty", [0, -3, True])
def test_add_custom_item_invalid_qty(mutator, trip_id, qty):
    with pytest.raises(ValidationError) as exc_info:
        mutator.add_custom_item(trip_id, "Kite", qty=qty)
    assert exc_info.value.code == ErrorCode.INVALID_QUANTITY
    assert mutator.list_items(trip_id) == []


def test_add_custom_item_unknown_trip(mutator):
    with pytest.raises(NotFoundError):
        mutator.add_custom_item("no-such-trip", "Kite")


# --- toggle / quantity / delete ---


def test_toggle_packed(mutator, trip_id):
    item = mutator.add_custom_item(trip_id, "Kite")

    assert mutator.toggle_packed(trip_id, item.id).packed is True
    assert mutator.toggle_packed(trip_id, item.id).packed is False


def test_set_packed_explicitly(mutator, trip_id):
    item = mutator.add_custom_item(trip_id, "Kite")

    assert mutator.toggle_packed(trip_id, item.id, packed=True).packed is True
    assert mutator.toggle_packed(trip_id, item.id, packed=True).packed is True


def test_update_quantity(mutator, trip_id):
    item = mutator.add_custom_item(trip_id, "Tent stakes")
    assert mutator.update_quantity(trip_id, item.id, 12).qty == 12


def test_update_quantity_rejects_zero(mutator, trip_id):
    item = mutator.add_custom_item(trip_id, "Tent stakes", qty=4)

    with pytest.raises(ValidationError):
        mutator.update_quantity(trip_id, item.id, 0)
    assert mutator.list_items(trip_id)[0].qty == 4


def test_delete_item(mutator, trip_id):
    item = mutator.add_custom_item(trip_id, "Kite")
    mutator.delete_item(trip_id, item.id)
    assert mutator.list_items(trip_id) == []


def test_item_operations_unknown_item(mutator, trip_id):
    for operation in (
        lambda: mutator.toggle_packed(trip_id, "missing"),
        lambda: mutator.update_quantity(trip_id, "missing", 2),
        lambda: mutator.delete_item(trip_id, "missing"),
    ):
        with pytest.raises(NotFoundError) as exc_info:
            operation()
        assert exc_info.value.code == ErrorCode.ITEM_NOT_FOUND


def test_item_from_another_trip_not_found(mutator, make_trip):
    first = make_trip("trip-a")
    second = make_trip("trip-b")
    item = mutator.add_custom_item(first, "Kite")

    with pytest.raises(NotFoundError):
        mutator.toggle_packed(second, item.id)


# --- Grouping ---


def test_group_items_by_category_order(catalog):
    items = [
        _item("Kite", FALLBACK_CATEGORY_ID),
        _item("Headlamp", "navigation_and_safety", packed=True),
        _item("Tent", "shelter"),
        _item("Whistle", "navigation_and_safety"),
    ]
    groups = group_items_by_category(items, catalog)

    assert [g.category_id for g in groups] == ["shelter", "navigation_and_safety", FALLBACK_CATEGORY_ID]
    nav = groups[1]
    assert nav.label == "Navigation & Safety"
    assert [i.name for i in nav.items] == ["Headlamp", "Whistle"]
    assert nav.packed_count == 1
    assert nav.total_count == 2


def test_group_unknown_category_uses_raw_id(catalog):
    groups = group_items_by_category([_item("Kite", "legacy_bucket"), _item("Tent", "shelter")], catalog)

    assert groups[-1].category_id == "legacy_bucket"
    assert groups[-1].label == "legacy_bucket"
    assert groups[-1].sort_order == UNKNOWN_CATEGORY_ORDER
    assert groups[-1].icon is None


def test_group_empty_list(catalog):
    assert group_items_by_category([], catalog) == []


# --- List state ---


def test_get_list_state(session_factory, mutator, winter_backpacking_trip):
    result = ListInitializer(session_factory).initialize_list(winter_backpacking_trip)
    headlamp = next(i for i in mutator.list_items(winter_backpacking_trip) if i.name == "Headlamp")
    mutator.toggle_packed(winter_backpacking_trip, headlamp.id)

    state = mutator.get_list_state(winter_backpacking_trip)

    assert state.is_initialized is True
    assert state.version == result.version
    assert state.total_items == result.item_count
    assert state.packed_items == 1
    assert sum(g.total_count for g in state.categories) == state.total_items
    orders = [g.sort_order for g in state.categories]
    assert orders == sorted(orders)


def test_get_list_state_before_initialization(mutator, trip_id):
    state = mutator.get_list_state(trip_id)
    assert state.is_initialized is False
    assert state.version is None
    assert state.categories == []
