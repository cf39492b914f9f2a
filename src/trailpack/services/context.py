"""
Trip context resolution.

Derives the season, temperature band, wind and precipitation conditions and
camping style for a trip. Everything here is pure except
resolve_trip_context(), which may consult an optional weather provider.
"""

import logging
import re
from datetime import date

from trailpack.models.catalog import CampingStyle, Precipitation, Season, TemperatureBand
from trailpack.models.context import Forecast, TripContext, TripInputs
from trailpack.weather import WeatherProvider

logger = logging.getLogger(__name__)

TROPICS_LATITUDE = 23.5
POLAR_LATITUDE = 60.0

FREEZING_F = 32
COLD_F = 50
MILD_F = 70

WINDY_AVG_MPH = 15
WINDY_GUST_MPH = 20
PRECIP_PROBABILITY_THRESHOLD = 30

_TEMPERATE_BANDS = {
    Season.WINTER: TemperatureBand.BELOW_FREEZING,
    Season.SHOULDER: TemperatureBand.MILD,
    Season.SUMMER: TemperatureBand.HOT,
}
_TROPICAL_BANDS = {
    Season.WINTER: TemperatureBand.MILD,
    Season.SHOULDER: TemperatureBand.HOT,
    Season.SUMMER: TemperatureBand.HOT,
}
_POLAR_BANDS = {
    Season.WINTER: TemperatureBand.BELOW_FREEZING,
    Season.SHOULDER: TemperatureBand.COLD,
    Season.SUMMER: TemperatureBand.MILD,
}

_LOCATION_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("coastal", ("dune", "beach", "coast", "shore")),
    ("desert", ("desert",)),
    ("mountains", ("mountain", "peak", "summit")),
    ("forest", ("forest", "woods")),
)


def determine_season(start: date, latitude: float | None = None) -> Season:
    """Meteorological season by month, flipped for the southern hemisphere."""
    if start.month in (12, 1, 2):
        season = Season.WINTER
    elif start.month in (6, 7, 8):
        season = Season.SUMMER
    else:
        season = Season.SHOULDER

    if latitude is not None and latitude < 0:
        if season is Season.WINTER:
            season = Season.SUMMER
        elif season is Season.SUMMER:
            season = Season.WINTER
    return season


def determine_temperature_band(
    season: Season,
    latitude: float | None = None,
    min_temp_f: float | None = None,
) -> TemperatureBand:
    """Band from a forecast minimum when available, otherwise a season/latitude default."""
    if min_temp_f is not None:
        if min_temp_f <= FREEZING_F:
            return TemperatureBand.BELOW_FREEZING
        if min_temp_f <= COLD_F:
            return TemperatureBand.COLD
        if min_temp_f <= MILD_F:
            return TemperatureBand.MILD
        return TemperatureBand.HOT

    bands = _TEMPERATE_BANDS
    if latitude is not None:
        if abs(latitude) < TROPICS_LATITUDE:
            bands = _TROPICAL_BANDS
        elif abs(latitude) >= POLAR_LATITUDE:
            bands = _POLAR_BANDS
    return bands.get(season, TemperatureBand.MILD)


def determine_windy(avg_wind_mph: float | None = None, gust_mph: float | None = None) -> bool:
    if avg_wind_mph is not None and avg_wind_mph >= WINDY_AVG_MPH:
        return True
    if gust_mph is not None and gust_mph >= WINDY_GUST_MPH:
        return True
    return False


def determine_precipitation(
    precip_probability: float | None = None,
    min_temp_f: float | None = None,
) -> Precipitation:
    if precip_probability is None or precip_probability < PRECIP_PROBABILITY_THRESHOLD:
        return Precipitation.NONE
    if min_temp_f is not None and min_temp_f <= FREEZING_F:
        return Precipitation.SNOW
    return Precipitation.RAIN


_STYLE_TOKENS: tuple[tuple[CampingStyle, frozenset[str]], ...] = (
    (CampingStyle.CAR_CAMPING, frozenset({"car", "overland", "overlanding", "rooftop"})),
    (CampingStyle.BACKPACKING, frozenset({"backpack", "backpacking", "backpacker"})),
    (CampingStyle.HAMMOCK, frozenset({"hammock", "hammocking"})),
    (CampingStyle.RV, frozenset({"rv", "camper", "campervan", "motorhome"})),
)


def normalize_camping_style(style: str | CampingStyle | None) -> CampingStyle:
    """
    Map free-text camping style onto the enum.

    "Car Camping", "car-camping", "CAR_CAMPING" and "carCamping" all become
    CampingStyle.CAR_CAMPING. Matching is by whole word, so "carry-in site" is not
    car camping. A missing style is CampingStyle.ANY (no style constraint); text that
    names no known style is CampingStyle.UNKNOWN.
    """
    if isinstance(style, CampingStyle):
        return style
    if not style or not style.strip():
        return CampingStyle.ANY

    # Split camelCase before lowercasing: "carCamping" -> "car Camping"
    spaced = re.sub(r"([a-z])([A-Z])", r"\1 \2", style.strip())
    tokens = set(re.split(r"[^a-z0-9]+", spaced.lower()))

    for camping_style, words in _STYLE_TOKENS:
        if tokens & words:
            return camping_style
    return CampingStyle.UNKNOWN


def extract_location_hints(location_name: str | None) -> tuple[str, ...]:
    if not location_name:
        return ()
    lower = location_name.lower()
    return tuple(hint for hint, words in _LOCATION_KEYWORDS if any(w in lower for w in words))


def build_trip_context(
    trip: TripInputs,
    forecast: Forecast | None = None,
    *,
    today: date | None = None,
) -> TripContext:
    start = trip.start_date or today or date.today()
    forecast = forecast or Forecast()

    season = determine_season(start, trip.latitude)
    return TripContext(
        season=season,
        temperature_band=determine_temperature_band(season, trip.latitude, forecast.min_temp_f),
        windy=determine_windy(forecast.avg_wind_mph, forecast.gust_mph),
        precipitation=determine_precipitation(forecast.precip_probability, forecast.min_temp_f),
        camping_style=normalize_camping_style(trip.camping_style),
        location_name=trip.location_name,
        location_hints=extract_location_hints(trip.location_name),
    )


def resolve_trip_context(
    trip: TripInputs,
    weather: WeatherProvider | None = None,
    *,
    today: date | None = None,
) -> TripContext:
    """Build the context, enriching it with weather when a provider is available."""
    forecast = None
    if weather is not None:
        try:
            forecast = weather.get_forecast(trip)
        except Exception:
            logger.warning("Weather provider failed, using seasonal defaults", exc_info=True)

    context = build_trip_context(trip, forecast, today=today)
    logger.debug("Resolved trip context: %s", context)
    return context
