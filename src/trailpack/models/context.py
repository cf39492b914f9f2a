from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from trailpack.models.catalog import CampingStyle, Precipitation, Season, TemperatureBand


class TripInputs(BaseModel):
    """Trip attributes supplied by the trip data source."""

    model_config = ConfigDict(from_attributes=True)

    start_date: date | None = None
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    camping_style: str | None = None
    location_name: str | None = None


class Forecast(BaseModel):
    """Observed or forecast conditions from the weather collaborator."""

    min_temp_f: float | None = None
    avg_wind_mph: float | None = Field(default=None, ge=0.0)
    gust_mph: float | None = Field(default=None, ge=0.0)
    precip_probability: float | None = Field(default=None, ge=0.0, le=100.0)


class TripContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    season: Season
    temperature_band: TemperatureBand
    windy: bool = False
    precipitation: Precipitation = Precipitation.NONE
    camping_style: CampingStyle = CampingStyle.ANY
    location_name: str | None = None
    location_hints: tuple[str, ...] = ()
