import logging

import streamlit as st

from config import get_setting
from theme import apply_theme, footer, language_switcher
from translations import FOOTER, translate

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# --- 1. PAGE SETUP ---

st.set_page_config(page_title="ALI - CTM Travel Assistant", page_icon="🚌", layout="centered")
apply_theme()

if "chat_open" not in st.session_state:
    st.session_state.chat_open = False

language = language_switcher()


def t(key: str, **kwargs) -> str:
    return translate(language, key, **kwargs)


# --- 2. WELCOME BANNER ---

st.title(f"🚌 {t('welcome')}")
st.markdown(f"<p style='text-align: center'>{t('subtitle')}</p>", unsafe_allow_html=True)

# --- 3. ACTIONS ---

chat_label = t("close_chat") if st.session_state.chat_open else t("talk")
if st.button(chat_label, key="toggle_chat", width="stretch"):
    st.session_state.chat_open = not st.session_state.chat_open
    st.rerun()

if st.button(t("order"), key="go_food", width="stretch"):
    st.switch_page("pages/food_order.py")

if st.button(t("where_am_i"), key="go_location", width="stretch"):
    st.switch_page("pages/location.py")

# --- 4. CHAT WIDGET ---

if st.session_state.chat_open:
    chat_url = get_setting("CHAT_WIDGET_URL")
    logger.info("Opening chat widget")
    st.iframe(chat_url, height=600)

footer(FOOTER)
