"""REST Countries API directory provider implementation."""
import logging
from typing import List

import requests

from country_data import CountryRecord
from directory_provider import DirectoryProviderBase, DirectoryLoadError

# Only the fields the country pages consume; keeps the single bulk response small.
DIRECTORY_FIELDS = (
    "name",
    "flags",
    "population",
    "currencies",
    "capital",
    "languages",
    "region",
    "subregion",
    "area",
    "timezones",
)


class RestCountriesProvider(DirectoryProviderBase):
    """
    Directory provider using the REST Countries v3.1 API.

    The whole dataset comes back in one GET: no pagination, no per-country calls.
    """

    BASE_URL = "https://restcountries.com/v3.1/all"

    def __init__(self, base_url: str = BASE_URL, timeout: int = 10):
        self.base_url = base_url
        self.timeout = timeout

    def load_all(self) -> List[CountryRecord]:
        params = {"fields": ",".join(DIRECTORY_FIELDS)}
        try:
            logging.info(f"Requesting country directory: {self.base_url}")
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            logging.info(f"Directory response status: {response.status_code}")

            if not response.ok:
                raise DirectoryLoadError(
                    f"Directory request failed: HTTP {response.status_code}: {response.text[:200]}"
                )

            payload = response.json()
        except ValueError as e:
            # requests' JSONDecodeError is also a RequestException; check it first
            logging.error(f"Directory response is not JSON: {e}")
            raise DirectoryLoadError(f"Failed to parse response: {str(e)}")
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during directory request: {e}")
            raise DirectoryLoadError(f"Network error: {str(e)}")

        if not isinstance(payload, list):
            raise DirectoryLoadError(f"Expected a JSON array, got {type(payload).__name__}")

        records = []
        for item in payload:
            try:
                records.append(CountryRecord.from_api(item))
            except (ValueError, TypeError, AttributeError) as e:
                logging.warning(f"Skipping unparseable country entry: {e}")
        logging.info(f"Loaded {len(records)} countries ({len(payload) - len(records)} skipped)")
        return records
