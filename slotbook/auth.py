# ----- slotbook/auth.py -----
import streamlit as st

from .models import Gender, User


def login(on_login):
    """Name + gender sign-in form; any pair is accepted."""
    st.title("📅  Reservation")
    with st.form("login"):
        name = st.text_input("이름 (Name)").strip()
        gender = st.radio(
            "성별 (Gender)",
            list(Gender),
            format_func=lambda g: g.value,
            horizontal=True,
        )
        if st.form_submit_button("Sign in"):
            on_login(User(name=name, gender=gender))
            st.rerun()
