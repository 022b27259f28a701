"""Configuration loaded from the environment (and a local .env file)."""
import logging
import os
from dataclasses import dataclass
from typing import NamedTuple, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from restcountries_provider import RestCountriesProvider


class RemoteImagePattern(NamedTuple):
    protocol: str
    hostname: str
    path_prefix: str


# Exactly the weather icon host; no other remote image source is trusted.
REMOTE_IMAGE_PATTERNS = (
    RemoteImagePattern(protocol="https", hostname="openweathermap.org", path_prefix="/img/wn/"),
)


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass
class AppConfig:
    weather_api_key: Optional[str]
    weather_lang: str = "en"
    countries_api_url: str = RestCountriesProvider.BASE_URL
    http_timeout: int = 10
    favourites_file: str = "favourites.json"


def load_config(require_weather_key: bool = True) -> AppConfig:
    """
    Read configuration from the process environment.

    Variables: WEATHER_API_KEY, WEATHER_LANG, COUNTRIES_API_URL, HTTP_TIMEOUT,
    FAVOURITES_FILE.

    Raises:
        ConfigError: If WEATHER_API_KEY is required but unset, or HTTP_TIMEOUT is not a number
    """
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY")
    if require_weather_key and not api_key:
        raise ConfigError("Missing WEATHER_API_KEY in environment")

    timeout = os.getenv("HTTP_TIMEOUT", "10")
    try:
        timeout_val = int(timeout)
    except ValueError as exc:
        raise ConfigError(f"Invalid HTTP_TIMEOUT: {timeout!r}") from exc

    config = AppConfig(
        weather_api_key=api_key,
        weather_lang=os.getenv("WEATHER_LANG", "en"),
        countries_api_url=os.getenv("COUNTRIES_API_URL", RestCountriesProvider.BASE_URL),
        http_timeout=timeout_val,
        favourites_file=os.getenv("FAVOURITES_FILE", "favourites.json"),
    )
    logging.info("Configuration loaded: countries_api=%s lang=%s timeout=%ss",
                 config.countries_api_url, config.weather_lang, config.http_timeout)
    return config


def is_allowed_image_url(url: Optional[str]) -> bool:
    """True if the image URL is served from a trusted remote image pattern."""
    if not url:
        return False
    parsed = urlparse(url)
    return any(
        parsed.scheme == pattern.protocol
        and parsed.hostname == pattern.hostname
        and parsed.path.startswith(pattern.path_prefix)
        for pattern in REMOTE_IMAGE_PATTERNS
    )
