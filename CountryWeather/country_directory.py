"""Session-scoped country directory with explicit load status."""
import asyncio
import enum
import logging
from typing import Optional, Tuple
from country_data import CountryRecord
from directory_provider import DirectoryProviderBase, DirectoryLoadError


class LoadStatus(enum.Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class DirectoryCache:
    """
    Holds the full country list for the lifetime of a session.

    The list is fetched once with a single bulk request and is read-only
    afterwards. Status is tracked separately from the records, so an empty
    list never doubles as "still loading".
    """

    def __init__(self, provider: DirectoryProviderBase):
        self.provider = provider
        self._records: Tuple[CountryRecord, ...] = ()
        self._status = LoadStatus.NOT_LOADED
        self._last_error: Optional[str] = None
        self._inflight: Optional["asyncio.Future[Tuple[CountryRecord, ...]]"] = None

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def pending(self) -> bool:
        return self._status is LoadStatus.LOADING

    @property
    def loaded(self) -> bool:
        return self._status is LoadStatus.LOADED

    @property
    def records(self) -> Tuple[CountryRecord, ...]:
        return self._records

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    async def ensure_loaded(self) -> Tuple[CountryRecord, ...]:
        """
        Load the directory unless it is already loaded.

        Concurrent callers share the same in-flight request.

        Raises:
            DirectoryLoadError: If the bulk load fails
        """
        if self._status is LoadStatus.LOADED:
            logging.debug(f"Directory already loaded ({len(self._records)} countries)")
            return self._records
        if self._inflight is None:
            self._status = LoadStatus.LOADING
            self._last_error = None
            self._inflight = asyncio.ensure_future(self._load())
        # shield: one cancelled waiter must not cancel the load for the others
        return await asyncio.shield(self._inflight)

    async def reload(self) -> Tuple[CountryRecord, ...]:
        """Force a fresh bulk request, e.g. after a failed load."""
        if self._inflight is not None:
            return await asyncio.shield(self._inflight)
        self._status = LoadStatus.NOT_LOADED
        return await self.ensure_loaded()

    async def _load(self) -> Tuple[CountryRecord, ...]:
        logging.info("Loading country directory...")
        try:
            records = await asyncio.to_thread(self.provider.load_all)
        except Exception as e:
            self._status = LoadStatus.FAILED
            self._last_error = str(e)
            logging.error(f"Country directory load failed: {e}")
            raise
        finally:
            self._inflight = None

        self._records = tuple(records)
        self._status = LoadStatus.LOADED
        logging.info(f"Country directory ready: {len(self._records)} countries")
        return self._records
