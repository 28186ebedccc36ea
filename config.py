import os

import streamlit as st

DEFAULTS = {
    "GEOCODER_URL": "https://nominatim.openstreetmap.org/search",
    "GEOCODER_TIMEOUT": "10",
    "GEOCODER_USER_AGENT": "ali-travel-assistant/0.1",
    "GEOCODER_LIMIT": "5",
    "ASSUMED_SPEED_KMH": "60",
    "CHAT_WIDGET_URL": (
        "https://cdn.botpress.cloud/webchat/v3.3/shareable.html"
        "?configUrl=https://files.bpcontent.cloud/2025/11/28/12/20251128123759-Z8MZR84U.json"
    ),
    "DEFAULT_LANGUAGE": "en",
}


def _secrets_available() -> bool:
    # st.secrets raises when no secrets.toml exists (local dev, tests)
    try:
        return len(st.secrets) > 0
    except FileNotFoundError:
        return False


def get_setting(key_name: str, default: str | None = None) -> str:
    """Fetch a setting from st.secrets, then os.environ, then the built-in defaults."""
    if hasattr(st, 'secrets') and _secrets_available() and key_name in st.secrets:
        return str(st.secrets[key_name])
    if key_name in os.environ:
        return os.environ[key_name]
    if default is not None:
        return default
    return DEFAULTS.get(key_name, "")


def get_float(key_name: str) -> float:
    return float(get_setting(key_name))


def get_int(key_name: str) -> int:
    return int(get_setting(key_name))
