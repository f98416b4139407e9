"""
Data model shared by the storage layer, the operations and the UI.

Everything here round-trips through JSON exactly as the browser app
stored it: enums are plain strings, ``createdAt``/``dateStr`` keep their
camelCase names on the wire.
"""
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class SlotTime(str, Enum):
    MORNING = "Morning"
    LUNCH = "Lunch"
    DINNER = "Dinner"


@dataclass(frozen=True)
class SlotInfo:
    key: SlotTime
    label: str
    time: str


SLOTS = (
    SlotInfo(SlotTime.MORNING, "아침", "07:00"),
    SlotInfo(SlotTime.LUNCH, "점심", "12:00"),
    SlotInfo(SlotTime.DINNER, "저녁", "19:00"),
)


class User(BaseModel):
    """The signed-in person; identity is the name alone."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    gender: Gender


class Reservation(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictStr
    name: StrictStr
    gender: Gender
    slot: SlotTime
    date_str: StrictStr = Field(..., alias="dateStr", description="YYYY-MM-DD")
    created_at: StrictInt = Field(..., alias="createdAt", description="Epoch milliseconds")


ReservationMap = dict[str, list[Reservation]]

_MAP_ADAPTER = TypeAdapter(ReservationMap)


def reservation_map_to_json(reservations: ReservationMap) -> str:
    return _MAP_ADAPTER.dump_json(reservations, by_alias=True).decode("utf-8")


def reservation_map_from_json(text: str) -> ReservationMap:
    """Decode a stored map. Raises ValidationError (a ValueError) on bad JSON or shape."""
    return _MAP_ADAPTER.validate_json(text)
