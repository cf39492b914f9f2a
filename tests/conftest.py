"""Shared test fixtures for TrailPack."""

import os
import sys
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def _sqlite_config():
    from trailpack.config import Config

    return Config(
        aws_region="us-east-1",
        database_url="sqlite://",
        db_host="localhost",
        db_port=5432,
        db_name="trailpack",
        db_user="trailpack",
        db_password="localdev",
        environment="test",
    )


# SQLite fixtures
@pytest.fixture
def database():
    """Provide an in-memory SQLite database with all tables created."""
    from trailpack.db import Database

    db = Database(_sqlite_config())
    db.connect()
    db.create_all()
    yield db
    db.disconnect()


@pytest.fixture
def session_factory(database):
    return database.session_factory


@pytest.fixture
def catalog():
    from trailpack.catalog import default_catalog

    return default_catalog()


@pytest.fixture
def make_trip(session_factory):
    """Insert a trip row and return its id."""
    from trailpack.db import Trip

    def _make(trip_id: str = "trip-1", **fields):
        with session_factory.begin() as session:
            session.add(Trip(id=trip_id, **fields))
        return trip_id

    return _make


@pytest.fixture
def winter_backpacking_trip(make_trip):
    """January trip at 45°N: winter, below freezing, backpacking."""
    return make_trip(
        "trip-winter",
        start_date=date(2027, 1, 15),
        latitude=45.0,
        camping_style="backpacking",
        location_name="Mount Hood Wilderness",
    )


# PostgreSQL fixtures
@pytest.fixture
def pg_database():
    """Provide a PostgreSQL-backed Database for integration tests."""
    from trailpack.config import get_config
    from trailpack.db import Database, Trip

    db = Database(get_config())
    db.connect()
    db.create_all()
    yield db

    # Cleanup: trips cascade to items and suggestion records
    with db.session_factory.begin() as session:
        session.query(Trip).filter(Trip.id.like("it-%")).delete(synchronize_session=False)
    db.disconnect()
