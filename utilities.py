import logging
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from distance_estimator import Coordinate, compute_distance_km
from restaurants import Restaurant

logger = logging.getLogger(__name__)


class utilities:
    """
    Utility class for validating UI input and shaping data for display
    """

    MAX_QUERY_LENGTH = 100

    @staticmethod
    def check_user_query(query: str) -> bool:
        """
        Validates a destination query before it is sent to the geocoder.
        ---
        Logic:
        1. Reject empty or blank queries.
        2. Reject queries longer than MAX_QUERY_LENGTH.
        3. Anything else is a place name, whatever its script or punctuation
           ("Jemaa el-Fna (Marrakech)", "Rabat & Salé", "Dar l’Bacha").
        """
        if not query or not query.strip():
            return False
        return len(query) <= utilities.MAX_QUERY_LENGTH

    @staticmethod
    def check_user_cords(lat: float, lon: float) -> bool:
        if isinstance(lat, bool) or isinstance(lon, bool):
            return False
        if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
            return False
        if not (-90 <= lat <= 90) or not (-180 <= lon <= 180):
            return False

        return True

    @staticmethod
    def parse_position(params: Mapping[str, Any]) -> Optional[Coordinate]:
        """
        Reads a position pushed through the page URL (?lat=..&lon=..), as sent by
        the station QR codes or a phone's location share link.

        :param params: st.query_params or any mapping of strings
        :return: Coordinate, or None when there is no usable fix
        """
        lat = params.get("lat")
        lon = params.get("lon")
        if lat is None and lon is None:
            return None

        try:
            lat, lon = float(lat), float(lon)
        except (TypeError, ValueError):
            # Bad fix, keep the last known position
            logger.warning("Ignoring unreadable position lat=%r lon=%r", lat, lon)
            return None

        if not utilities.check_user_cords(lat, lon):
            logger.warning("Ignoring out of range position lat=%r lon=%r", lat, lon)
            return None
        return Coordinate(lat, lon)

    @staticmethod
    def parse_geolocation(reading: Any) -> Optional[Coordinate]:
        """
        Reads the browser Geolocation API answer returned by streamlit_js_eval.

        :param reading: None while the browser has not answered, else
            {"coords": {"latitude": .., "longitude": .., ...}, "timestamp": ..}
            or {"error": {"code": .., "message": ..}} when sensing failed
        :return: Coordinate, or None when there is no usable fix
        """
        if reading is None:
            return None
        if not isinstance(reading, Mapping):
            logger.warning("Ignoring unexpected device location reading %r", reading)
            return None
        if "error" in reading:
            # Denied permission or no sensor
            logger.warning("Device location unavailable: %s", reading["error"])
            return None

        coords = reading.get("coords") or {}
        if coords.get("latitude") is None or coords.get("longitude") is None:
            logger.warning("Ignoring device location reading without coordinates: %r", reading)
            return None
        return utilities.parse_position({"lat": coords["latitude"], "lon": coords["longitude"]})

    @staticmethod
    def create_restaurant_table(restaurants: Iterable[Restaurant],
                                observer: Optional[Coordinate] = None) -> pd.DataFrame:
        """
        Builds the restaurant list shown on the food page.

        :param restaurants: Restaurants to list
        :type restaurants: Iterable[Restaurant]
        :param observer: Current position, when known the distance column is computed live
        :type observer: Coordinate | None
        :return: DataFrame with one row per restaurant
        :rtype: DataFrame
        """
        rows = []
        for restaurant in restaurants:
            if observer is not None:
                distance = f"{compute_distance_km(observer, restaurant.coordinate):.1f} km"
            else:
                distance = restaurant.distance
            rows.append({
                "Restaurant": restaurant.name,
                "Location": restaurant.location,
                "Distance": distance,
                "Menu": ", ".join(restaurant.menu),
            })

        return pd.DataFrame(rows) if rows else pd.DataFrame()

    @staticmethod
    def create_map_points(observer: Optional[Coordinate],
                          destination: Optional[Coordinate] = None) -> pd.DataFrame:
        """Observer and destination as labelled rows, the shape the map layer consumes."""
        points = []
        if observer is not None:
            points.append({"label": "observer", "latitude": observer.latitude, "longitude": observer.longitude})
        if destination is not None:
            points.append({"label": "destination", "latitude": destination.latitude, "longitude": destination.longitude})
        return pd.DataFrame(points, columns=["label", "latitude", "longitude"])
