from abc import ABC, abstractmethod

from trailpack.models.context import Forecast, TripInputs


class WeatherProvider(ABC):
    """Optional collaborator that supplies observed or forecast conditions for a trip."""

    @abstractmethod
    def get_forecast(self, trip: TripInputs) -> Forecast | None: ...


class StaticWeatherProvider(WeatherProvider):
    """Returns the same forecast for every trip. Useful for local runs and demos."""

    def __init__(self, forecast: Forecast | None) -> None:
        self._forecast = forecast

    def get_forecast(self, trip: TripInputs) -> Forecast | None:
        return self._forecast
