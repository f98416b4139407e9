from datetime import date

import pytest
from streamlit.testing.v1 import AppTest

from slotbook.dates import date_key, shift_month
from slotbook.models import Gender, SlotTime, User
from slotbook.storage import SESSION_USER_KEY, FileStore, load_reservations

TIMEOUT = 30


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    path = tmp_path / "storage.json"
    monkeypatch.setenv("SLOTBOOK_BACKEND", "file")
    monkeypatch.setenv("SLOTBOOK_DATA_FILE", str(path))
    return path


@pytest.fixture
def app(data_file):
    at = AppTest.from_file("../main.py", default_timeout=TIMEOUT)
    at.run()
    return at


def _sign_in(at, name="Kim"):
    at.text_input[0].input(name)
    at.button[0].click().run()
    return at.session_state["controller"]


def test_login_form_shown_first(app):
    assert not app.exception
    assert len(app.text_input) == 1
    assert app.session_state["controller"].user is None


def test_sign_in_then_book_and_delete(app, data_file):
    controller = _sign_in(app)
    assert controller.user == User(name="Kim", gender=Gender.MALE)
    assert len(app.text_input) == 0

    app.button(key="add-Lunch").click().run()
    assert controller.view.is_modal_open
    assert controller.view.target_slot is SlotTime.LUNCH

    app.button(key="modal-submit").click().run()
    today = date_key(date.today())
    booked = controller.reservations[today]
    assert len(booked) == 1
    assert (booked[0].name, booked[0].slot) == ("Kim", SlotTime.LUNCH)
    assert not controller.view.is_modal_open
    assert load_reservations(FileStore(data_file)) == {today: booked}

    app.button(key=f"del-{booked[0].id}").click().run()
    assert controller.reservations == {today: []}
    assert load_reservations(FileStore(data_file)) == {today: []}
    assert not app.exception


def test_cancel_closes_panel_without_booking(app):
    controller = _sign_in(app)
    app.button(key="add-Dinner").click().run()
    app.button(key="modal-close").click().run()
    assert not controller.view.is_modal_open
    assert controller.reservations == {}


def test_month_navigation(app):
    controller = _sign_in(app)
    start = controller.view.current_date
    app.button(key="next-month").click().run()
    assert controller.view.current_date == shift_month(start, 1)
    app.button(key="prev-month").click().run()
    app.button(key="prev-month").click().run()
    assert controller.view.current_date == shift_month(start, -1)


def test_logout_shows_login_again(app):
    controller = _sign_in(app)
    app.button(key="logout").click().run()
    assert controller.user is None
    assert len(app.text_input) == 1


def test_reload_keeps_user_signed_in(data_file):
    at = AppTest.from_file("../main.py", default_timeout=TIMEOUT)
    at.query_params[SESSION_USER_KEY] = User(name="Kim", gender=Gender.FEMALE).model_dump_json()
    at.run()
    assert at.session_state["controller"].user == User(name="Kim", gender=Gender.FEMALE)
    assert len(at.text_input) == 0
    assert not at.exception


def test_reload_with_garbled_user_shows_login(data_file):
    at = AppTest.from_file("../main.py", default_timeout=TIMEOUT)
    at.query_params[SESSION_USER_KEY] = "{not json"
    at.run()
    assert at.session_state["controller"].user is None
    assert len(at.text_input) == 1


def test_bookings_survive_new_session(app, data_file):
    _sign_in(app)
    app.button(key="add-Morning").click().run()
    app.button(key="modal-submit").click().run()

    fresh = AppTest.from_file("../main.py", default_timeout=TIMEOUT)
    fresh.run()
    restored = fresh.session_state["controller"].reservations
    assert [r.slot for r in restored[date_key(date.today())]] == [SlotTime.MORNING]
