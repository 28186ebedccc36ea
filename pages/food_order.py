import logging

import streamlit as st

from restaurants import RESTAURANTS, OrderError, submit_order
from theme import apply_theme, footer, language_switcher
from translations import FOOTER, translate
from utilities import utilities

logger = logging.getLogger(__name__)

apply_theme()

if "active_menu_id" not in st.session_state:
    st.session_state.active_menu_id = None

language = language_switcher()


def t(key: str, **kwargs) -> str:
    return translate(language, key, **kwargs)


if st.button(t("home"), key="go_home"):
    st.switch_page("app.py")

st.header(t("food_title"))
st.markdown(f"<p style='text-align: center'>{t('food_subtitle')}</p>", unsafe_allow_html=True)

# Live distances once the location page has a fix for this session
tracker = st.session_state.get("tracker")
observer = tracker.observer if tracker is not None else None
st.dataframe(
    utilities.create_restaurant_table(RESTAURANTS, observer),
    hide_index=True,
    width="stretch",
)

for restaurant in RESTAURANTS:
    with st.container(border=True):
        st.subheader(restaurant.name)
        st.caption(restaurant.location)

        menu_open = st.session_state.active_menu_id == restaurant.id
        label = t("hide_menu") if menu_open else t("check_menu")
        if st.button(label, key=f"menu_{restaurant.id}"):
            # Only one menu is open at a time
            st.session_state.active_menu_id = None if menu_open else restaurant.id
            st.rerun()

        if not menu_open:
            continue

        for item in restaurant.menu:
            st.markdown(f"- {item}")

        with st.form(key=f"order_{restaurant.id}", clear_on_submit=True):
            customer_name = st.text_input(t("name_placeholder"), placeholder=t("name_placeholder"))
            menu_item = st.selectbox(t("menu_item"), restaurant.menu)
            notes = st.text_area(t("notes_placeholder"), placeholder=t("notes_placeholder"))
            submitted = st.form_submit_button(t("send_order"))

        if submitted:
            try:
                submit_order(restaurant, customer_name, menu_item, notes)
            except OrderError as e:
                st.error(str(e))
            else:
                st.success(t("order_sent", restaurant=restaurant.name))

footer(FOOTER)
