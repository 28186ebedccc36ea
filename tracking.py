import logging
import threading
from enum import Enum
from typing import Optional

from distance_estimator import (
    DEFAULT_SPEED_KMH,
    Coordinate,
    DistanceEstimate,
    estimate_distance,
    resolve_destination,
)
from geocoding import Geocoder, GeocodingError

logger = logging.getLogger(__name__)


class LookupStatus(Enum):
    SKIPPED = "skipped"
    UNAVAILABLE = "unavailable"
    UNRESOLVED = "unresolved"
    AWAITING_POSITION = "awaiting_position"
    RESOLVED = "resolved"


class TripTracker:
    """
    Holds the state of one open location view: the latest observer position,
    the last resolved destination and the estimate computed between them.
    ---
    Logic:
    1. Position updates overwrite the observer, the most recent one wins. Once a
       destination is known, a moved observer refreshes the estimate.
    2. A lookup that fails or finds nothing leaves destination and estimate as they were.
    3. Reading the observer and writing destination and estimate happen under one lock,
       so an estimate always belongs to the destination stored next to it.
    """

    def __init__(self, geocoder: Geocoder, assumed_speed_kmh: float = DEFAULT_SPEED_KMH):
        self.geocoder = geocoder
        self.assumed_speed_kmh = assumed_speed_kmh
        self._lock = threading.Lock()
        self._observer: Optional[Coordinate] = None
        self._destination: Optional[Coordinate] = None
        self._estimate: Optional[DistanceEstimate] = None
        self.last_error: Optional[str] = None

    @property
    def observer(self) -> Optional[Coordinate]:
        return self._observer

    @property
    def destination(self) -> Optional[Coordinate]:
        return self._destination

    @property
    def estimate(self) -> Optional[DistanceEstimate]:
        return self._estimate

    def update_position(self, coordinate: Coordinate) -> None:
        with self._lock:
            if coordinate == self._observer:
                return
            self._observer = coordinate
            if self._destination is not None:
                self._estimate = estimate_distance(coordinate, self._destination, self.assumed_speed_kmh)

    def lookup(self, query: str) -> LookupStatus:
        if not query or not query.strip():
            return LookupStatus.SKIPPED

        # Network call stays outside the lock
        try:
            destination = resolve_destination(query, self.geocoder)
        except GeocodingError as e:
            logger.warning("Destination lookup unavailable for '%s': %s", query, e)
            self.last_error = str(e)
            return LookupStatus.UNAVAILABLE

        self.last_error = None
        if destination is None:
            logger.info("No match for destination '%s'", query)
            return LookupStatus.UNRESOLVED

        with self._lock:
            self._destination = destination
            if self._observer is None:
                # An old estimate would belong to the previous destination
                self._estimate = None
                return LookupStatus.AWAITING_POSITION
            estimate = estimate_distance(self._observer, destination, self.assumed_speed_kmh)
            self._estimate = estimate

        logger.info("Estimated %.1f km to '%s'", estimate.kilometers, query)
        return LookupStatus.RESOLVED

    def reset(self) -> None:
        with self._lock:
            self._observer = None
            self._destination = None
            self._estimate = None
            self.last_error = None
