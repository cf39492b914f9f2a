"""Library catalog models: categories, items and their matching tags."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Season(str, Enum):
    WINTER = "winter"
    SUMMER = "summer"
    SHOULDER = "shoulder"
    ANY = "any"


class TemperatureBand(str, Enum):
    BELOW_FREEZING = "belowFreezing"
    COLD = "cold"
    MILD = "mild"
    HOT = "hot"
    ANY = "any"


class Wind(str, Enum):
    WINDY = "windy"
    ANY = "any"


class Precipitation(str, Enum):
    NONE = "none"
    RAIN = "rain"
    SNOW = "snow"
    ANY = "any"


class CampingStyle(str, Enum):
    CAR_CAMPING = "carCamping"
    BACKPACKING = "backpacking"
    HAMMOCK = "hammock"
    RV = "rv"
    UNKNOWN = "unknown"
    ANY = "any"


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    label: str
    sort_order: int
    icon: str | None = None


class ItemTags(BaseModel):
    """Matching facets. Each facet is a set of values; ``any`` is the wildcard."""

    model_config = ConfigDict(frozen=True)

    seasons: frozenset[Season] = frozenset({Season.ANY})
    temperature_bands: frozenset[TemperatureBand] = frozenset({TemperatureBand.ANY})
    wind: frozenset[Wind] = frozenset({Wind.ANY})
    precipitation: frozenset[Precipitation] = frozenset({Precipitation.ANY})
    camping_styles: frozenset[CampingStyle] = frozenset({CampingStyle.ANY})
    base: bool = False


class LibraryItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    category_id: str
    default_qty: int = Field(default=1, ge=1)
    priority: int = Field(..., ge=1, le=5)
    notes: str | None = None
    tags: ItemTags
    pro_only: bool = False

    @property
    def is_base(self) -> bool:
        return self.tags.base
