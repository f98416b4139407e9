"""
main.py  –  Streamlit reservation scheduler
────────────────────────────────────────────
Run with:
    streamlit run main.py

Users sign in with a name/gender pair, pick a day on the calendar and
book one of the three daily slots (Morning / Lunch / Dinner).
"""

import streamlit as st

from slotbook import ReservationController, SessionStore, Settings, build_durable_store, configure_logging
from slotbook import auth, ui

st.set_page_config(page_title="Reservation", page_icon="📅", layout="wide")


# ───────────────────────────────────────────────────────────────
# 1.  One controller per browser session, hydrated once
# ───────────────────────────────────────────────────────────────
if "controller" not in st.session_state:
    settings = Settings()
    configure_logging(settings.log_level)
    # the signed-in user lives in the URL so a reload of this tab keeps it
    controller = ReservationController(
        SessionStore(st.query_params),
        build_durable_store(settings),
    )
    controller.restore()
    st.session_state["controller"] = controller

controller: ReservationController = st.session_state["controller"]


# ───────────────────────────────────────────────────────────────
# 2.  Login pane
# ───────────────────────────────────────────────────────────────
if controller.user is None:
    auth.login(controller.login)
    st.stop()                      # wait until user clicks “Sign in”


# ───────────────────────────────────────────────────────────────
# 3.  Calendar + slot list + confirmation
# ───────────────────────────────────────────────────────────────
ui.header(controller.user, controller.logout)

view = controller.view
calendar_col, slots_col = st.columns([7, 5], gap="large")

with calendar_col:
    ui.calendar_view(
        view.current_date,
        view.selected_date,
        controller.reservations,
        controller.select_date,
        controller.change_month,
    )

with slots_col:
    ui.slot_list(
        view.selected_date,
        controller.current_reservations(),
        controller.open_add_modal,
        controller.delete,
    )
    ui.reservation_modal(
        view.is_modal_open,
        view.target_slot,
        view.selected_date,
        controller.user,
        controller.submit,
        controller.close_modal,
    )
