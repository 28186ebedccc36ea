import streamlit as st

from config import get_setting
from translations import LANGUAGES, is_rtl


page_typography = """
<style>
    /* CTM red backdrop for the main page area */
    section[data-testid="stMain"] {
        background: linear-gradient(180deg, rgba(220, 38, 38, 0.8) 0%, rgba(127, 29, 29, 0.9) 100%) !important;
        color: #ffffff !important;
        -webkit-font-smoothing: antialiased !important;
        -moz-osx-font-smoothing: grayscale !important;
    }

    section[data-testid="stMain"] h1,
    section[data-testid="stMain"] h2,
    section[data-testid="stMain"] h3 {
        color: #ffffff !important;
        letter-spacing: 0.02em !important;
        text-align: center;
    }

    /* Rounded, shadowed buttons */
    section[data-testid="stMain"] button {
        border-radius: 1rem !important;
        font-weight: 600 !important;
        box-shadow: 0 4px 12px rgba(0, 0, 0, 0.25) !important;
    }

    .ali-footer {
        margin-top: 2.5rem;
        text-align: center;
        font-size: 0.75rem;
        opacity: 0.7;
    }
</style>
"""

rtl_direction = """
<style>
    section[data-testid="stMain"] p,
    section[data-testid="stMain"] h1,
    section[data-testid="stMain"] h2,
    section[data-testid="stMain"] label {
        direction: rtl !important;
    }
</style>
"""


def current_language() -> str:
    """Language shared across pages, initialised from DEFAULT_LANGUAGE."""
    if "language" not in st.session_state:
        default = get_setting("DEFAULT_LANGUAGE")
        st.session_state.language = default if default in LANGUAGES else "en"
    return st.session_state.language


def apply_theme() -> None:
    st.markdown(page_typography, unsafe_allow_html=True)
    if is_rtl(current_language()):
        st.markdown(rtl_direction, unsafe_allow_html=True)


def language_switcher() -> str:
    """Renders the EN / FR / AR buttons and returns the active language."""
    language = current_language()
    columns = st.columns(len(LANGUAGES) + 3)
    for column, (code, label) in zip(columns, LANGUAGES.items()):
        with column:
            button_type = "primary" if code == language else "secondary"
            if st.button(label, key=f"lang_{code}", type=button_type):
                st.session_state.language = code
                st.rerun()
    return language


def footer(text: str) -> None:
    st.markdown(f'<p class="ali-footer">{text}</p>', unsafe_allow_html=True)
