"""Packing library catalog."""

from functools import lru_cache

from trailpack.catalog.library import (
    FALLBACK_CATEGORY_ID,
    Catalog,
    build_item,
    library_item_id,
    slugify_category,
)
from trailpack.catalog.seed import CATEGORIES, ITEMS, PACKING_LIST_VERSION


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The seed catalog, built once per process."""
    return Catalog(CATEGORIES, ITEMS, version=PACKING_LIST_VERSION)


__all__ = [
    "FALLBACK_CATEGORY_ID",
    "PACKING_LIST_VERSION",
    "Catalog",
    "build_item",
    "default_catalog",
    "library_item_id",
    "slugify_category",
]
