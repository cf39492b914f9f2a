#!/usr/bin/env python3
"""Create packing tables for local development and insert a sample trip.

Tables are created straight from the ORM models against DATABASE_URL (or the
DB_* settings), so this works with a local PostgreSQL or a SQLite file. Use
Alembic for anything shared.

Usage:
    DATABASE_URL=sqlite:///trailpack.db python scripts/create_local_tables.py
"""

import sys
from datetime import date
from pathlib import Path

from sqlalchemy.exc import IntegrityError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trailpack.config import get_config
from trailpack.db import Database, Trip
from trailpack.services import ListInitializer, SuggestionManager

SAMPLE_TRIP_ID = "local-winter-backpacking"


def create_sample_trip(database):
    """Insert a January backpacking trip at 45°N."""
    try:
        with database.session_factory.begin() as session:
            session.add(
                Trip(
                    id=SAMPLE_TRIP_ID,
                    start_date=date(date.today().year + 1, 1, 15),
                    latitude=45.0,
                    camping_style="backpacking",
                    location_name="Mount Hood Wilderness",
                )
            )
        print(f"✓ Created sample trip {SAMPLE_TRIP_ID}")
    except IntegrityError:
        print(f"✓ Sample trip {SAMPLE_TRIP_ID} already exists")


def main():
    """Create tables, the sample trip and its packing list."""
    config = get_config()

    with Database(config) as database:
        print(f"Creating packing tables at {database.url()}...")
        print()

        database.create_all()
        print("✓ Tables ready: trips, trip_packing_items, trip_packing_suggestions")
        create_sample_trip(database)

        result = ListInitializer(database.session_factory).initialize_list(SAMPLE_TRIP_ID)
        if result.initialized:
            print(f"✓ Packing list initialized: {result.base_count} base + {result.suggested_count} suggested items")
        else:
            print(f"✓ Packing list already at version {result.version} ({result.item_count} items)")

        suggestions = SuggestionManager(database.session_factory).compute_suggestions(SAMPLE_TRIP_ID)
        print(f"✓ {len(suggestions.suggestions)} suggestions available")

    print()
    print("✅ Local database ready")


if __name__ == "__main__":
    main()
