"""
Streamlit views: calendar, slot list and the confirmation panel.

Each renderer only reads state and calls the handler it is given;
mutations go through the controller and are followed by ``st.rerun()``
so the page redraws from the new state.
"""
import calendar
from datetime import date

import streamlit as st

from .dates import date_key, month_grid
from .operations import slot_counts
from .models import SLOTS, Gender, Reservation, ReservationMap, SlotTime, User

WEEKDAYS = ("일", "월", "화", "수", "목", "금", "토")
GENDER_DOT = {Gender.MALE: "🔵", Gender.FEMALE: "🔴"}


def header(user: User, on_logout):
    left, right = st.columns([4, 1])
    left.title("📅  Reservation")
    with right:
        st.write(f"{GENDER_DOT[user.gender]} {user.name}님")
        if st.button("로그아웃", key="logout"):
            on_logout()
            st.rerun()


def calendar_view(current: date, selected: date, reservations: ReservationMap, on_date_select, on_month_change):
    prev_col, title_col, next_col = st.columns([1, 5, 1])
    if prev_col.button("◀", key="prev-month"):
        on_month_change(-1)
        st.rerun()
    title_col.subheader(f"{current.year}년 {current.month}월 · {calendar.month_name[current.month]}")
    if next_col.button("▶", key="next-month"):
        on_month_change(1)
        st.rerun()

    for col, label in zip(st.columns(7), WEEKDAYS):
        col.markdown(f"**{label}**")

    for week in month_grid(current.year, current.month):
        for col, day in zip(st.columns(7), week):
            if day is None:
                col.write(" ")
                continue
            count = sum(slot_counts(reservations, date_key(day)).values())
            label = f"{day.day}" + (f" · {count}" if count else "")
            kind = "primary" if day == selected else "secondary"
            if col.button(label, key=f"day-{day.isoformat()}", type=kind):
                on_date_select(day)
                st.rerun()


def slot_list(selected: date, reservations: list[Reservation], on_add_click, on_delete_click):
    st.subheader(f"{selected.month}월 {selected.day}일 예약")
    for slot in SLOTS:
        booked = [r for r in reservations if r.slot == slot.key]
        with st.container(border=True):
            title, add = st.columns([4, 1])
            title.markdown(f"**{slot.label}** · {slot.time} ({len(booked)})")
            if add.button("＋", key=f"add-{slot.key.value}"):
                on_add_click(slot.key)
                st.rerun()
            for r in booked:
                who, remove = st.columns([4, 1])
                who.write(f"{GENDER_DOT[r.gender]} {r.name}")
                if remove.button("🗑", key=f"del-{r.id}"):
                    on_delete_click(r.id)
                    st.rerun()


def reservation_modal(is_open: bool, slot: SlotTime | None, selected: date, user: User, on_submit, on_close):
    if not is_open or slot is None:
        return
    info = next(s for s in SLOTS if s.key == slot)
    with st.container(border=True):
        st.markdown(
            f"**{selected.isoformat()} {info.label} ({info.time})** 에 "
            f"{user.name}님으로 예약할까요?"
        )
        confirm, cancel = st.columns(2)
        if confirm.button("예약하기", key="modal-submit", type="primary"):
            on_submit()
            st.rerun()
        if cancel.button("취소", key="modal-close"):
            on_close()
            st.rerun()
