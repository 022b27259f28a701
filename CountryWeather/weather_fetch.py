"""Dependent weather fetch - follows the selected country's capital."""
import asyncio
import enum
import logging
from typing import Optional
from country_data import CountryRecord
from weather_provider import WeatherProviderBase, WeatherFetchError
from weather_data import WeatherSnapshot

UNAVAILABLE_MESSAGE = "Weather data not available"


class WeatherStatus(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


class WeatherFetch:
    """
    Weather state for one view, driven by the current selection.

    Each fetch takes a generation token when it starts. A result is applied
    only if no newer fetch (or reset) happened in the meantime, so a slow
    response for a previous capital never lands on the current page.
    There is no retry: a failed fetch stays failed until the selection changes.
    """

    def __init__(self, provider: WeatherProviderBase):
        self.provider = provider
        self._status = WeatherStatus.IDLE
        self._snapshot: Optional[WeatherSnapshot] = None
        self._error: Optional[str] = None
        self._location: Optional[str] = None
        self._generation = 0

    @property
    def status(self) -> WeatherStatus:
        return self._status

    @property
    def snapshot(self) -> Optional[WeatherSnapshot]:
        return self._snapshot

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def location(self) -> Optional[str]:
        """The capital the current state belongs to."""
        return self._location

    def reset(self) -> None:
        """Drop all weather state; any fetch still in flight will be discarded."""
        self._generation += 1
        self._status = WeatherStatus.IDLE
        self._snapshot = None
        self._error = None
        self._location = None

    def prepare(self, record: Optional[CountryRecord]) -> Optional[int]:
        """
        Bring the state in line with the selection having changed to ``record``.

        Runs synchronously, so the state never shows weather for a capital
        other than the selected one. Returns the token for a fetch that still
        has to run, or None when there is nothing to fetch: no capital (state
        reset to IDLE) or the same capital as before (state kept).
        """
        capital = record.primary_capital if record is not None else None
        if capital is None:
            if self._location is not None or self._status is not WeatherStatus.IDLE:
                self.reset()
            return None
        if capital == self._location:
            logging.debug(f"Weather for {capital} already requested, not refetching")
            return None

        self._generation += 1
        self._status = WeatherStatus.PENDING
        self._snapshot = None
        self._error = None
        self._location = capital
        return self._generation

    async def observe(self, record: Optional[CountryRecord]) -> None:
        """
        React to the selection having changed to ``record``.

        Fetches once per distinct primary capital. A record without a capital
        (or no record at all) resets to IDLE without touching the network.
        """
        token = self.prepare(record)
        if token is not None:
            await self.fetch(self._location, token)

    async def fetch(self, location: str, token: int) -> None:
        """Run the fetch prepared under ``token``; the result is dropped if the token is stale."""
        try:
            snapshot = await asyncio.to_thread(self.provider.get_current, location)
        except WeatherFetchError as e:
            self._fail(location, token, e)
            return
        except Exception as e:
            logging.exception(f"Unexpected error fetching weather for {location}: {e}")
            self._fail(location, token, e)
            return

        if token != self._generation:
            logging.info(f"Discarding stale weather result for {location}")
            return
        self._status = WeatherStatus.READY
        self._snapshot = snapshot
        logging.info(f"Weather ready for {location}: {snapshot.temp}°C, {snapshot.condition}")

    def _fail(self, location: str, token: int, error: Exception) -> None:
        if token != self._generation:
            logging.info(f"Discarding stale weather error for {location}")
            return
        logging.error(f"Weather fetch for {location} failed: {error}")
        self._status = WeatherStatus.FAILED
        self._error = UNAVAILABLE_MESSAGE
