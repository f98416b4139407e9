import pytest
from pydantic import ValidationError

from slotbook.models import (
    SLOTS,
    Gender,
    Reservation,
    SlotTime,
    User,
    reservation_map_from_json,
    reservation_map_to_json,
)


def test_slots_are_fixed_and_ordered():
    assert [(s.key, s.label, s.time) for s in SLOTS] == [
        (SlotTime.MORNING, "아침", "07:00"),
        (SlotTime.LUNCH, "점심", "12:00"),
        (SlotTime.DINNER, "저녁", "19:00"),
    ]


def test_reservation_from_browser_record():
    record = {
        "id": "k3j9x0a1b",
        "name": "Kim",
        "gender": "Female",
        "slot": "Morning",
        "dateStr": "2024-01-05",
        "createdAt": 1704412800000,
    }
    reservation = Reservation.model_validate(record)
    assert reservation.gender is Gender.FEMALE
    assert reservation.slot is SlotTime.MORNING
    assert reservation.date_str == "2024-01-05"
    assert reservation.model_dump(by_alias=True, mode="json") == record


@pytest.mark.parametrize(
    "record",
    [
        {"name": "Kim"},
        {"name": "Kim", "gender": "male"},
        {"name": None, "gender": "Male"},
        ["Kim", "Male"],
    ],
)
def test_user_shape_mismatch(record):
    with pytest.raises(ValidationError):
        User.model_validate(record)


def test_created_at_must_be_integer():
    record = {"id": "a", "name": "Kim", "gender": "Male", "slot": "Lunch", "dateStr": "2024-01-05", "createdAt": True}
    with pytest.raises(ValidationError):
        Reservation.model_validate(record)


def test_empty_list_survives_json():
    assert reservation_map_from_json(reservation_map_to_json({"2024-06-02": []})) == {"2024-06-02": []}


def test_map_must_be_object():
    with pytest.raises(ValueError):
        reservation_map_from_json("null")
