"""Shared fixtures for the travel assistant tests."""

import pytest

from distance_estimator import Coordinate
from geocoding import Geocoder, GeocodingError


class FakeGeocoder(Geocoder):
    """Geocoder returning canned candidates and recording every query."""

    def __init__(self, candidates=None, error: Exception | None = None):
        self.candidates = candidates if candidates is not None else []
        self.error = error
        self.queries = []

    def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.candidates)


@pytest.fixture
def marrakech():
    return Coordinate(31.6295, -7.9811)


@pytest.fixture
def rabat():
    return Coordinate(34.0209, -6.8416)


@pytest.fixture
def rabat_geocoder():
    return FakeGeocoder([
        {"lat": "34.0209", "lon": "-6.8416", "display_name": "Rabat, Morocco"},
        {"lat": "33.9716", "lon": "-6.8498", "display_name": "Rabat-Salé"},
    ])


@pytest.fixture
def empty_geocoder():
    return FakeGeocoder([])


@pytest.fixture
def failing_geocoder():
    return FakeGeocoder(error=GeocodingError("service down"))
