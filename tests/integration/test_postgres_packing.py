"""Integration tests for the packing tables and services against PostgreSQL."""

import uuid
from datetime import date

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from trailpack.catalog import library_item_id
from trailpack.db import PackingItem, Trip
from trailpack.services import ListInitializer, PackingListMutator, SuggestionManager

HAND_WARMERS_ID = library_item_id("layers_and_warmth", "Hand warmers")

# ── Helpers ───────────────────────────────────────────────────────────────────


@pytest.fixture
def pg_trip(pg_database):
    trip_id = f"it-{uuid.uuid4()}"
    with pg_database.session_factory.begin() as session:
        session.add(Trip(id=trip_id, start_date=date(2027, 1, 15), latitude=45.0, camping_style="backpacking"))
    return trip_id


# ── Schema constraint tests ───────────────────────────────────────────────────


@pytest.mark.integration
def test_health_check(pg_database):
    assert pg_database.health_check() is True


@pytest.mark.integration
def test_qty_check_constraint(pg_database, pg_trip):
    with pytest.raises(IntegrityError):
        with pg_database.session_factory.begin() as session:
            session.add(
                PackingItem(id=str(uuid.uuid4()), trip_id=pg_trip, name="Kite", category_id="other", qty=0, source="user")
            )


@pytest.mark.integration
def test_source_check_constraint(pg_database, pg_trip):
    with pytest.raises(IntegrityError):
        with pg_database.session_factory.begin() as session:
            session.add(
                PackingItem(
                    id=str(uuid.uuid4()), trip_id=pg_trip, name="Kite", category_id="other", qty=1, source="import"
                )
            )


@pytest.mark.integration
def test_trip_delete_cascades(pg_database, pg_trip):
    ListInitializer(pg_database.session_factory).initialize_list(pg_trip)
    SuggestionManager(pg_database.session_factory).dismiss_suggestion(pg_trip, HAND_WARMERS_ID)

    with pg_database.session_factory.begin() as session:
        session.execute(text("DELETE FROM trips WHERE id = :id"), {"id": pg_trip})

    with pg_database.session_factory() as session:
        items = session.execute(
            text("SELECT count(*) FROM trip_packing_items WHERE trip_id = :id"), {"id": pg_trip}
        ).scalar()
        records = session.execute(
            text("SELECT count(*) FROM trip_packing_suggestions WHERE trip_id = :id"), {"id": pg_trip}
        ).scalar()
    assert items == 0
    assert records == 0


# ── Service flow ──────────────────────────────────────────────────────────────


@pytest.mark.integration
def test_initialize_and_accept_flow(pg_database, pg_trip):
    session_factory = pg_database.session_factory
    initializer = ListInitializer(session_factory)

    first = initializer.initialize_list(pg_trip)
    assert first.initialized is True
    assert initializer.initialize_list(pg_trip).initialized is False

    item = SuggestionManager(session_factory).accept_suggestion(pg_trip, HAND_WARMERS_ID)
    names = [i.name for i in PackingListMutator(session_factory).list_items(pg_trip)]

    assert item.name in names
    assert len(names) == first.item_count + 1
