"""
Database ORM models and clients for TrailPack.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from trailpack.db.database import Database
from trailpack.db.repository import PackingRepository
from trailpack.db.schemas.base import Base
from trailpack.db.schemas.packing_item import PackingItem
from trailpack.db.schemas.suggestion import SuggestionState
from trailpack.db.schemas.trip import Trip

__all__ = ["Base", "Database", "PackingItem", "PackingRepository", "SuggestionState", "Trip"]
