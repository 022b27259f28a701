"""Directory provider abstraction - where the full country list comes from."""
from abc import ABC, abstractmethod
from typing import List
from country_data import CountryRecord


class DirectoryProviderBase(ABC):
    """Abstract base class for country directory providers."""

    @abstractmethod
    def load_all(self) -> List[CountryRecord]:
        """
        Fetch the entire directory in one request.

        Returns:
            List[CountryRecord]: Every country, in the order the source returned them

        Raises:
            DirectoryLoadError: If the directory cannot be fetched or parsed
        """
        pass


class DirectoryLoadError(Exception):
    """Exception raised when the bulk directory load fails."""
    pass
