import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import requests

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Raised when the geocoding service cannot be reached or returns garbage."""


class Geocoder(ABC):
    """
    Place-search collaborator.
    Implementations return candidates ordered by relevance, each exposing at
    least 'lat' and 'lon' as numeric strings.
    """

    @abstractmethod
    def search(self, query: str) -> List[Dict[str, Any]]:
        ...


class NominatimGeocoder(Geocoder):
    """
    Geocoder backed by the public OpenStreetMap Nominatim search endpoint.
    """
    SEARCH_URL = "https://nominatim.openstreetmap.org/search"

    def __init__(self, base_url: str = SEARCH_URL, timeout: float = 10.0,
                 user_agent: str = "ali-travel-assistant", limit: int = 5):
        self.base_url = base_url
        self.timeout = timeout  # seconds before the lookup is reported unavailable
        self.user_agent = user_agent  # Nominatim rejects anonymous clients
        self.limit = limit

    def search(self, query: str) -> List[Dict[str, Any]]:
        logger.info("Geocoding '%s'", query)
        params = {
            "q": query,
            "format": "json",
            "limit": self.limit,
        }

        try:
            response = requests.get(
                self.base_url,
                params=params,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning("Geocoding request failed for '%s': %s", query, e)
            raise GeocodingError(f"Geocoding request failed: {e}") from e
        except ValueError as e:
            # Body was not JSON
            raise GeocodingError(f"Geocoding response was not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise GeocodingError(f"Unexpected geocoding response: {data!r}")

        logger.debug("Geocoding '%s' returned %d candidates", query, len(data))
        return data
