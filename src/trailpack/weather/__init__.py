"""Weather collaborator abstraction."""

from trailpack.weather.interface import StaticWeatherProvider, WeatherProvider

__all__ = ["StaticWeatherProvider", "WeatherProvider"]
