"""Immutable packing library: categories, items and lookups over them."""

import logging
import re
import uuid
from collections.abc import Iterable
from types import MappingProxyType

from trailpack.errors import CatalogError, ErrorCode, NotFoundError
from trailpack.models.catalog import Category, ItemTags, LibraryItem

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY_ID = "other"

_ITEM_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "trailpack/packing-library")

# Legacy and shorthand labels seen on user-entered items, keyed by slug.
CATEGORY_ALIASES: dict[str, str] = {
    "safety": "navigation_and_safety",
    "navigation": "navigation_and_safety",
    "safety_and_first_aid": "first_aid",
    "sleep": "sleep_system",
    "sleeping": "sleep_system",
    "cooking": "kitchen",
    "food_and_kitchen": "kitchen",
    "layers": "layers_and_warmth",
    "warmth": "layers_and_warmth",
    "rain": "rain_and_weather",
    "weather": "rain_and_weather",
    "personal": "personal_items",
    "gear_tools": "tools",
    "tripspecific": "trip_specific",
    "misc": FALLBACK_CATEGORY_ID,
    "miscellaneous": FALLBACK_CATEGORY_ID,
}


def slugify_category(label: str) -> str:
    """
    Normalize a category label to id form.

    "Safety and First Aid" -> "safety_and_first_aid"
    "Food & Kitchen" -> "food_and_kitchen"
    """
    slug = label.strip().lower().replace("&", "and")
    slug = re.sub(r"[^a-z0-9]", "_", slug)
    slug = re.sub(r"_+", "_", slug)
    return slug.strip("_")


def library_item_id(category_id: str, name: str) -> str:
    """Stable id derived from the item's category and name."""
    return str(uuid.uuid5(_ITEM_NAMESPACE, f"{category_id}/{name}"))


def build_item(
    name: str,
    category_id: str,
    priority: int,
    tags: ItemTags,
    *,
    default_qty: int = 1,
    notes: str | None = None,
    pro_only: bool = False,
) -> LibraryItem:
    return LibraryItem(
        id=library_item_id(category_id, name),
        name=name,
        category_id=category_id,
        default_qty=default_qty,
        priority=priority,
        notes=notes,
        tags=tags,
        pro_only=pro_only,
    )


class Catalog:
    """
    Versioned, read-only set of categories and library items.

    Built once at startup and passed explicitly to the matcher and services.
    """

    def __init__(self, categories: Iterable[Category], items: Iterable[LibraryItem], version: int) -> None:
        categories = sorted(categories, key=lambda c: c.sort_order)
        items = tuple(items)

        categories_by_id: dict[str, Category] = {}
        for category in categories:
            if category.id in categories_by_id:
                raise CatalogError(f"Duplicate category id: {category.id}")
            categories_by_id[category.id] = category
        if FALLBACK_CATEGORY_ID not in categories_by_id:
            raise CatalogError(f"Catalog must define the '{FALLBACK_CATEGORY_ID}' category")

        items_by_id: dict[str, LibraryItem] = {}
        for item in items:
            if item.id in items_by_id:
                raise CatalogError(f"Duplicate library item id: {item.id} ({item.name})")
            if item.category_id not in categories_by_id:
                raise CatalogError(f"Item '{item.name}' references unknown category '{item.category_id}'")
            items_by_id[item.id] = item

        self._version = version
        self._categories = tuple(categories)
        self._items = items
        self._categories_by_id = MappingProxyType(categories_by_id)
        self._items_by_id = MappingProxyType(items_by_id)
        self._label_slugs = MappingProxyType({slugify_category(c.label): c.id for c in categories})

    @property
    def version(self) -> int:
        return self._version

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    @property
    def items(self) -> tuple[LibraryItem, ...]:
        return self._items

    def get_category(self, category_id: str) -> Category | None:
        return self._categories_by_id.get(category_id)

    def category_label(self, category_id: str) -> str:
        category = self.get_category(category_id)
        return category.label if category else category_id

    def get_item(self, item_id: str) -> LibraryItem | None:
        return self._items_by_id.get(item_id)

    def require_item(self, item_id: str) -> LibraryItem:
        item = self.get_item(item_id)
        if item is None:
            raise NotFoundError(f"Library item {item_id} not found", code=ErrorCode.LIBRARY_ITEM_NOT_FOUND)
        return item

    def normalize_category_id(self, raw: str | None) -> str:
        """Map a category id, label or legacy alias onto a known category, else the fallback."""
        if not raw or not raw.strip():
            return FALLBACK_CATEGORY_ID

        slug = slugify_category(raw)
        if slug in self._categories_by_id:
            return slug
        alias = CATEGORY_ALIASES.get(slug)
        if alias and alias in self._categories_by_id:
            return alias
        if slug in self._label_slugs:
            return self._label_slugs[slug]

        logger.warning("Unknown packing category %r, using '%s'", raw, FALLBACK_CATEGORY_ID)
        return FALLBACK_CATEGORY_ID

    def __len__(self) -> int:
        return len(self._items)
