"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from typing import Optional

ICON_BASE_URL = "https://openweathermap.org/img/wn/"


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for one query location, independent of any specific API."""
    location: str  # the capital the snapshot was requested for
    temp: float  # °C
    feels_like: float  # °C
    humidity: float  # percentage
    wind_speed: float  # m/s
    condition: str  # e.g., "Clouds", "Rain", "Clear"
    icon: str  # e.g., "04d"
    description: str = ""  # e.g., "broken clouds"
    timestamp: Optional[int] = None  # UNIX timestamp (UTC)

    @property
    def icon_url(self) -> Optional[str]:
        """URL of the condition icon on the weather icon host."""
        if not self.icon:
            return None
        return f"{ICON_BASE_URL}{self.icon}@2x.png"
