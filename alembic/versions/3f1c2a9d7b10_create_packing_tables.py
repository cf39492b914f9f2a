"""create_packing_tables

Revision ID: 3f1c2a9d7b10
Revises: 
Create Date: 2026-10-19 09:12:44.120931

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Trips carry the packing list initialization marker
    op.execute("""
        CREATE TABLE trips (
            id VARCHAR(64) PRIMARY KEY,
            start_date DATE,
            latitude DOUBLE PRECISION,
            camping_style VARCHAR(50),
            location_name VARCHAR(255),
            packing_list_initialized BOOLEAN NOT NULL DEFAULT FALSE,
            packing_list_version INTEGER,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)

    op.execute("""
        CREATE TABLE trip_packing_items (
            id VARCHAR(36) PRIMARY KEY,
            trip_id VARCHAR(64) NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            name VARCHAR(255) NOT NULL,
            category_id VARCHAR(64) NOT NULL,
            qty INTEGER NOT NULL DEFAULT 1,
            packed BOOLEAN NOT NULL DEFAULT FALSE,
            source VARCHAR(20) NOT NULL,
            library_item_id VARCHAR(64),
            added_reason VARCHAR(255),
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_packing_items_qty CHECK (qty >= 1),
            CONSTRAINT chk_packing_items_source CHECK (source IN ('base', 'suggested', 'user'))
        )
    """)

    op.execute("""
        CREATE INDEX idx_packing_items_trip_id
        ON trip_packing_items (trip_id)
    """)

    op.execute("""
        CREATE TABLE trip_packing_suggestions (
            trip_id VARCHAR(64) NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            library_item_id VARCHAR(64) NOT NULL,
            status VARCHAR(20) NOT NULL DEFAULT 'new',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            PRIMARY KEY (trip_id, library_item_id),
            CONSTRAINT chk_suggestions_status CHECK (status IN ('new', 'added', 'dismissed'))
        )
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TABLE IF EXISTS trip_packing_suggestions")
    op.execute("DROP INDEX IF EXISTS idx_packing_items_trip_id")
    op.execute("DROP TABLE IF EXISTS trip_packing_items")
    op.execute("DROP TABLE IF EXISTS trips")
