import math
from dataclasses import dataclass
from typing import Optional

from geocoding import Geocoder, GeocodingError

EARTH_RADIUS_KM = 6371.0
DEFAULT_SPEED_KMH = 60.0


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (-90 <= self.latitude <= 90):
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not (-180 <= self.longitude <= 180):
            raise ValueError(f"Longitude out of range: {self.longitude}")

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Eta:
    hours: int
    minutes: int


@dataclass(frozen=True)
class DistanceEstimate:
    kilometers: float
    eta_hours: int
    eta_minutes: int


def resolve_destination(query: str, geocoder: Geocoder) -> Optional[Coordinate]:
    """
    Resolves a free-text place name to a Coordinate.
    ---
    Logic:
    1. Blank queries return None without touching the geocoder.
    2. The first candidate returned by the geocoder wins, the rest are ignored.
    3. No candidates means "unresolved" and returns None, not an error.

    GeocodingError raised by the geocoder propagates to the caller.
    """
    if not query or not query.strip():
        return None

    candidates = geocoder.search(query.strip())
    if not candidates:
        return None

    first = candidates[0]
    try:
        return Coordinate(float(first["lat"]), float(first["lon"]))
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodingError(f"Malformed geocoding candidate for '{query}': {first}") from e


def compute_distance_km(observer: Coordinate, destination: Coordinate) -> float:
    """
    Great-circle distance in kilometers using the haversine formula.

    The earth is treated as a sphere of radius 6371 km, so results can be off
    by up to ~0.5% compared to an ellipsoidal model.
    """
    lat1 = math.radians(observer.latitude)
    lat2 = math.radians(destination.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(destination.longitude - observer.longitude)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Float drift can push antipodal points just past 1
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def estimate_eta(distance_km: float, assumed_speed_kmh: float = DEFAULT_SPEED_KMH) -> Eta:
    """
    Naive travel time at a constant average speed.

    :param distance_km: Distance to cover, must not be negative
    :param assumed_speed_kmh: Average speed, must be positive
    :return: Whole hours plus minutes in [0, 59]
    """
    if distance_km < 0:
        raise ValueError(f"Distance must not be negative: {distance_km}")
    if assumed_speed_kmh <= 0:
        raise ValueError(f"Speed must be positive: {assumed_speed_kmh}")

    total_hours = distance_km / assumed_speed_kmh
    hours = math.floor(total_hours)
    minutes = round((total_hours - hours) * 60)

    # e.g. 1.999 hours rounds to 60 minutes
    if minutes == 60:
        hours += 1
        minutes = 0

    return Eta(hours=int(hours), minutes=int(minutes))


def estimate_distance(observer: Coordinate, destination: Coordinate,
                      assumed_speed_kmh: float = DEFAULT_SPEED_KMH) -> DistanceEstimate:
    kilometers = compute_distance_km(observer, destination)
    eta = estimate_eta(kilometers, assumed_speed_kmh)
    return DistanceEstimate(kilometers=kilometers, eta_hours=eta.hours, eta_minutes=eta.minutes)
