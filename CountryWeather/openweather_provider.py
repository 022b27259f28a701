"""OpenWeather Current Weather API provider implementation."""
import logging
import requests
from weather_provider import WeatherProviderBase, WeatherFetchError
from weather_data import WeatherSnapshot


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API.

    Uses the free Current Weather API: https://openweathermap.org/current
    Locations are queried by name (the ``q`` parameter), which is what the
    country pages have: a capital city and nothing more precise.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(
        self,
        api_key: str,
        units: str = "metric",
        lang: str = "en",
        timeout: int = 10
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            units: Temperature units ("metric", "imperial", or "standard")
            lang: Language code for descriptions (e.g., "en", "de")
            timeout: HTTP request timeout in seconds
        """
        self.api_key = api_key
        self.units = units
        self.lang = lang
        self.timeout = timeout

    def get_current(self, location: str) -> WeatherSnapshot:
        """
        Fetch current weather for a location from OpenWeather.

        Returns:
            WeatherSnapshot: Current weather information

        Raises:
            WeatherFetchError: If the API request fails
        """
        if not location or not location.strip():
            raise WeatherFetchError("No location given")

        params = {
            "q": location,
            "appid": self.api_key,
            "units": self.units,
            "lang": self.lang,
        }

        try:
            logging.info(f"Making OpenWeather API request: {self.BASE_URL} (q={location})")
            logging.debug(f"Request parameters: units={self.units}, lang={self.lang}")

            response = requests.get(self.BASE_URL, params=params, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")

            if not response.ok:
                logging.error(f"API request failed with status {response.status_code}")
                self._handle_error_response(response)

            data = response.json()
            logging.debug(f"API response (truncated): {str(data)[:500]}...")

            weather_array = data.get("weather", [])
            if not weather_array:
                logging.error("Response missing 'weather' array")
                raise WeatherFetchError("Response missing 'weather' array")
            weather = weather_array[0]

            main_data = data.get("main", {})
            if not main_data:
                raise WeatherFetchError("Response missing 'main' block")

            wind_data = data.get("wind", {})
            wind_speed = wind_data.get("speed", 0.0) if wind_data else 0.0

            snapshot = WeatherSnapshot(
                location=location,
                temp=float(main_data["temp"]),
                feels_like=float(main_data.get("feels_like", main_data["temp"])),
                humidity=float(main_data.get("humidity", 0.0)),
                wind_speed=float(wind_speed),
                condition=weather.get("main", "Unknown"),
                icon=weather.get("icon", ""),
                description=weather.get("description", ""),
                timestamp=data.get("dt"),
            )

            logging.info(f"Parsed weather for {location}: {snapshot.temp}°C, {snapshot.condition}")
            return snapshot

        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise WeatherFetchError(f"Failed to parse response: {str(e)}")
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise WeatherFetchError(f"Network error: {str(e)}")

    def _handle_error_response(self, response: requests.Response) -> None:
        """Parse and raise error from OpenWeather error response."""
        try:
            error_data = response.json()
        except ValueError:
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")
            raise WeatherFetchError(f"HTTP {response.status_code}: {response.text[:200]}")

        cod = error_data.get("cod", response.status_code)
        message = error_data.get("message", "Unknown error")
        logging.error(f"OpenWeather API error response: {error_data}")
        raise WeatherFetchError(f"OpenWeather API error {cod}: {message}")
