"""Selection state - which country the detail view is currently showing."""
import enum
import logging
from typing import Optional
from country_data import CountryRecord


class SelectionStatus(enum.Enum):
    EMPTY = "empty"
    LOADING = "loading"  # directory not yet populated
    FOUND = "found"
    NOT_FOUND = "not_found"


class Selection:
    """
    At most one selected record.

    Every transition replaces the whole state and bumps ``generation``, so
    anything started for an earlier selection can tell it is out of date.
    """

    def __init__(self):
        self._status = SelectionStatus.EMPTY
        self._record: Optional[CountryRecord] = None
        self._slug: Optional[str] = None
        self.generation = 0

    @property
    def status(self) -> SelectionStatus:
        return self._status

    @property
    def record(self) -> Optional[CountryRecord]:
        return self._record

    @property
    def slug(self) -> Optional[str]:
        return self._slug

    def loading(self, slug: str) -> None:
        self._set(SelectionStatus.LOADING, None, slug)

    def found(self, slug: str, record: CountryRecord) -> None:
        self._set(SelectionStatus.FOUND, record, slug)

    def not_found(self, slug: str) -> None:
        self._set(SelectionStatus.NOT_FOUND, None, slug)

    def clear(self) -> None:
        self._set(SelectionStatus.EMPTY, None, None)

    def _set(self, status: SelectionStatus, record: Optional[CountryRecord], slug: Optional[str]) -> None:
        self._status = status
        self._record = record
        self._slug = slug
        self.generation += 1
        logging.debug(f"Selection -> {status.value} (slug={slug!r}, generation={self.generation})")

    def __repr__(self) -> str:
        name = self._record.common_name if self._record else None
        return f"Selection(status={self._status.value}, record={name!r})"
