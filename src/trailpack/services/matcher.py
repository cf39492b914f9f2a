"""
Tag matching between library items and a trip context.

Camping style is a hard eligibility filter (AND). The weather facets
(season, temperature band, wind, precipitation) are independent triggers (OR):
an item tagged for both wind and snow appears when either condition holds.
The ``any`` wildcard satisfies the style filter but never triggers a weather
match on its own.
"""

from collections.abc import Iterable

from trailpack.catalog import Catalog
from trailpack.models.catalog import CampingStyle, LibraryItem, Precipitation, Wind
from trailpack.models.context import TripContext


def matches_style(item: LibraryItem, style: CampingStyle) -> bool:
    styles = item.tags.camping_styles
    return CampingStyle.ANY in styles or style in styles


def matches_season(item: LibraryItem, context: TripContext) -> bool:
    return context.season in item.tags.seasons


def matches_temperature(item: LibraryItem, context: TripContext) -> bool:
    return context.temperature_band in item.tags.temperature_bands


def matches_wind(item: LibraryItem, context: TripContext) -> bool:
    return context.windy and Wind.WINDY in item.tags.wind


def matches_precipitation(item: LibraryItem, context: TripContext) -> bool:
    return context.precipitation is not Precipitation.NONE and context.precipitation in item.tags.precipitation


def matches_weather(item: LibraryItem, context: TripContext) -> bool:
    return (
        matches_season(item, context)
        or matches_temperature(item, context)
        or matches_wind(item, context)
        or matches_precipitation(item, context)
    )


def dedupe_by_name(items: Iterable[LibraryItem]) -> list[LibraryItem]:
    """Keep the first item for each exact name."""
    seen: set[str] = set()
    unique: list[LibraryItem] = []
    for item in items:
        if item.name in seen:
            continue
        seen.add(item.name)
        unique.append(item)
    return unique


class Matcher:
    def __init__(self, catalog: Catalog, *, include_gated: bool = True) -> None:
        self._catalog = catalog
        self._include_gated = include_gated

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def _eligible(self) -> Iterable[LibraryItem]:
        for item in self._catalog.items:
            if item.pro_only and not self._include_gated:
                continue
            yield item

    def select_base_items(self, style: CampingStyle) -> list[LibraryItem]:
        """
        Base items for a style.

        CampingStyle.ANY (no style given) keeps every base item. Any other style,
        including UNKNOWN, keeps items tagged for that style or for any style.
        """
        unfiltered = style is CampingStyle.ANY
        return [item for item in self._eligible() if item.is_base and (unfiltered or matches_style(item, style))]

    def select_contextual_items(self, context: TripContext) -> list[LibraryItem]:
        return [
            item
            for item in self._eligible()
            if not item.is_base
            and matches_style(item, context.camping_style)
            and matches_weather(item, context)
        ]

    def select_initial_items(self, context: TripContext, min_priority: int) -> list[LibraryItem]:
        """Base items plus contextual items at or above min_priority, deduplicated by name."""
        contextual = [item for item in self.select_contextual_items(context) if item.priority >= min_priority]
        return dedupe_by_name([*self.select_base_items(context.camping_style), *contextual])
