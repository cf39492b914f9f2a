"""
Business services for TrailPack.

- context.py: trip context resolution (season, temperature, wind, precipitation, style)
- matcher.py: tag matching of library items against a trip context
- initializer.py: versioned, idempotent packing list initialization
- suggestions.py: suggestion computation and accept/dismiss lifecycle
- items.py: packing item CRUD and category grouping
- migration.py: Alembic migrations for the Lambda deployment
"""

from trailpack.services.initializer import ListInitializer
from trailpack.services.items import PackingListMutator, group_items_by_category
from trailpack.services.matcher import Matcher
from trailpack.services.suggestions import SuggestionManager

__all__ = ["ListInitializer", "Matcher", "PackingListMutator", "SuggestionManager", "group_items_by_category"]
