import logging

import folium
import streamlit as st
from streamlit_folium import st_folium
from streamlit_js_eval import get_geolocation

from config import get_float, get_int, get_setting
from distance_estimator import Coordinate
from geocoding import NominatimGeocoder
from theme import apply_theme, footer, language_switcher
from tracking import LookupStatus, TripTracker
from translations import FOOTER, translate
from utilities import utilities

logger = logging.getLogger(__name__)

# Marrakech, used until a position is shared
DEFAULT_LOCATION = {"latitude": 31.6295, "longitude": -7.9811}

apply_theme()

# --- 1. SESSION STATE ---

if "tracker" not in st.session_state:
    geocoder = NominatimGeocoder(
        base_url=get_setting("GEOCODER_URL"),
        timeout=get_float("GEOCODER_TIMEOUT"),
        user_agent=get_setting("GEOCODER_USER_AGENT"),
        limit=get_int("GEOCODER_LIMIT"),
    )
    st.session_state.tracker = TripTracker(geocoder, assumed_speed_kmh=get_float("ASSUMED_SPEED_KMH"))
if "lookup_status" not in st.session_state:
    st.session_state.lookup_status = None

tracker: TripTracker = st.session_state.tracker

language = language_switcher()


def t(key: str, **kwargs) -> str:
    return translate(language, key, **kwargs)


if st.button(t("home"), key="go_home"):
    st.switch_page("app.py")

st.header(t("location_title"))
st.markdown(f"<p style='text-align: center'>{t('location_subtitle')}</p>", unsafe_allow_html=True)

# --- 2. POSITION ---

# Device fix first, then a position shared through the URL, then manual entry
device_position = utilities.parse_geolocation(get_geolocation())
shared_position = utilities.parse_position(st.query_params)

if device_position is not None:
    tracker.update_position(device_position)
    st.success(t("position_device"))
elif shared_position is not None:
    tracker.update_position(shared_position)
    st.success(t("position_live"))
else:
    st.info(t("position_manual"))
    fallback = tracker.observer or Coordinate(**DEFAULT_LOCATION)
    col1, col2 = st.columns(2)
    with col1:
        latitude = st.number_input(
            t("latitude"), min_value=-90.0, max_value=90.0,
            value=fallback.latitude, format="%.4f",
        )
    with col2:
        longitude = st.number_input(
            t("longitude"), min_value=-180.0, max_value=180.0,
            value=fallback.longitude, format="%.4f",
        )
    if utilities.check_user_cords(latitude, longitude):
        tracker.update_position(Coordinate(latitude, longitude))

# --- 3. DESTINATION LOOKUP ---

with st.form(key="destination_form"):
    query = st.text_input(t("destination_placeholder"), placeholder=t("destination_placeholder"))
    searched = st.form_submit_button(t("search"))

if searched:
    if not query.strip():
        # Nothing is sent, previous result stays on screen
        logger.debug("Ignoring blank destination query")
    elif not utilities.check_user_query(query):
        st.warning(t("query_too_long", limit=utilities.MAX_QUERY_LENGTH))
    else:
        with st.spinner(t("search")):
            st.session_state.lookup_status = tracker.lookup(query)

status = st.session_state.lookup_status
if status is LookupStatus.AWAITING_POSITION and tracker.estimate is not None:
    # A position arrived after the lookup
    status = st.session_state.lookup_status = LookupStatus.RESOLVED
if status is LookupStatus.UNAVAILABLE:
    st.error(t("lookup_unavailable"))
elif status is LookupStatus.UNRESOLVED:
    st.warning(t("lookup_unresolved"))
elif status is LookupStatus.AWAITING_POSITION:
    st.info(t("awaiting_position"))
elif status is LookupStatus.RESOLVED:
    st.success(t("lookup_resolved"))

# --- 4. ESTIMATE ---

estimate = tracker.estimate
if estimate is not None:
    col1, col2 = st.columns(2)
    col1.metric(t("distance"), f"{estimate.kilometers:.1f} km")
    col2.metric(t("eta"), t("eta_value", hours=estimate.eta_hours, minutes=estimate.eta_minutes))
    st.caption(t("estimate_note", speed=f"{tracker.assumed_speed_kmh:g}"))

# --- 5. MAP ---

points = utilities.create_map_points(tracker.observer, tracker.destination)
if not points.empty:
    start = points.iloc[0]
    route_map = folium.Map(location=[start["latitude"], start["longitude"]], zoom_start=12)

    colors = {"observer": "blue", "destination": "red"}
    for _, point in points.iterrows():
        folium.Marker(
            [point["latitude"], point["longitude"]],
            tooltip=point["label"],
            icon=folium.Icon(color=colors[point["label"]]),
        ).add_to(route_map)

    if len(points) == 2:
        path = points[["latitude", "longitude"]].values.tolist()
        folium.PolyLine(path, color="red", weight=4, opacity=0.8).add_to(route_map)
        route_map.fit_bounds(path)

    # Display only, map interactions do not trigger reruns
    st_folium(route_map, key="route_map", height=420, use_container_width=True, returned_objects=[])

footer(FOOTER)
