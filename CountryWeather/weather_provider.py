"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from weather_data import WeatherSnapshot


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, location: str) -> WeatherSnapshot:
        """
        Fetch current weather for a free-text location name.

        Args:
            location: Place to query, e.g. a capital city ("Paris")

        Returns:
            WeatherSnapshot: Current weather information for that location

        Raises:
            WeatherFetchError: If the provider fails to fetch data
        """
        pass


class WeatherFetchError(Exception):
    """Exception raised when a weather provider fails."""
    pass
