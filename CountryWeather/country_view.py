"""Country detail view - routes a slug to a selection and its weather."""
import asyncio
import logging
from typing import Optional
from country_directory import DirectoryCache
from country_lookup import resolve
from selection_state import Selection, SelectionStatus
from weather_fetch import WeatherFetch, WeatherStatus
from weather_provider import WeatherProviderBase


class CountryDetailView:
    """
    One mounted country-detail page.

    The directory is shared and injected; the selection and the weather state
    belong to this view alone and are wiped when it is left.
    """

    def __init__(self, directory: DirectoryCache, weather_provider: WeatherProviderBase):
        self.directory = directory
        self.selection = Selection()
        self.weather = WeatherFetch(weather_provider)
        self.weather_task: Optional[asyncio.Task] = None

    async def enter(self, slug: str) -> SelectionStatus:
        """
        Show the country for ``slug``.

        Waits for the directory first if it is not loaded, so a slug is never
        reported as not found just because the data was not there yet.

        Raises:
            DirectoryLoadError: If the directory load fails (the selection is cleared
                on this or any other load error before it propagates)
        """
        if not self.directory.loaded:
            self.selection.loading(slug)
            generation = self.selection.generation
            try:
                await self.directory.ensure_loaded()
            except Exception:
                if self.selection.generation == generation:
                    self.selection.clear()
                raise
            if self.selection.generation != generation:
                # navigated or left while the directory was loading
                logging.debug(f"Resolution of {slug!r} superseded while loading")
                return self.selection.status

        self._resolve(slug)
        return self.selection.status

    async def navigate(self, slug: str) -> SelectionStatus:
        """Move to another country without leaving the view."""
        return await self.enter(slug)

    def leave(self) -> None:
        """Tear the view down: no selection or weather survives to the next visit."""
        self.selection.clear()
        self.weather.reset()
        self._cancel_weather_task()

    async def settle(self) -> None:
        """Wait for the current weather fetch, if any, to finish."""
        if self.weather_task is not None:
            await self.weather_task

    def _resolve(self, slug: str) -> None:
        record = resolve(slug, self.directory.records)
        if record is None:
            logging.info(f"No country matches slug {slug!r}")
            self.selection.not_found(slug)
        else:
            logging.info(f"Slug {slug!r} resolved to {record.common_name}")
            self.selection.found(slug, record)

        token = self.weather.prepare(record)
        if token is None and self.weather.status is not WeatherStatus.IDLE:
            # same capital as before: the running fetch (or its result) still applies
            return
        self._cancel_weather_task()
        if token is not None:
            self.weather_task = asyncio.ensure_future(self.weather.fetch(self.weather.location, token))

    def _cancel_weather_task(self) -> None:
        if self.weather_task is not None and not self.weather_task.done():
            self.weather_task.cancel()
        self.weather_task = None
