"""
Pure transforms over a ReservationMap.

Every function returns a new map and never mutates the one it was
given; callers holding the previous value keep seeing it unchanged.
Lists are copied only for the date key that actually changes.
"""
import random
import string
import time
from typing import Callable

from .models import Reservation, ReservationMap, SlotTime, User

_ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9


def new_reservation_id() -> str:
    # not collision-proof; good enough for one browser's worth of bookings
    return "".join(random.choices(_ID_ALPHABET, k=ID_LENGTH))


def _now_ms() -> int:
    return int(time.time() * 1000)


def add_reservation(
    reservations: ReservationMap,
    date_key: str,
    user: User | None,
    slot: SlotTime | None,
    *,
    now: Callable[[], int] | None = None,
    id_factory: Callable[[], str] | None = None,
) -> ReservationMap:
    """
    Append a reservation for `user` in `slot` on `date_key`.

    A missing user or slot makes this a no-op: the input map is returned
    as is. There is no capacity limit, so several reservations may share
    the same date and slot.
    """
    if user is None or slot is None:
        return reservations

    reservation = Reservation(
        id=(id_factory or new_reservation_id)(),
        name=user.name,
        gender=user.gender,
        slot=SlotTime(slot),
        date_str=date_key,
        created_at=(now or _now_ms)(),
    )
    updated = dict(reservations)
    updated[date_key] = [*reservations.get(date_key, []), reservation]
    return updated


def _contains(items: list[Reservation], reservation_id: str) -> bool:
    return any(r.id == reservation_id for r in items)


def delete_reservation(
    reservations: ReservationMap, reservation_id: str, selected_key: str
) -> ReservationMap:
    """
    Remove the reservation with `reservation_id`.

    The list under `selected_key` is searched first; if the id is not
    there every other date is scanned and the first match is removed.
    At most one list changes. A list left empty keeps its key.
    Unknown ids return the input map unchanged.
    """
    if _contains(reservations.get(selected_key, []), reservation_id):
        target = selected_key
    else:
        target = next(
            (key for key, items in reservations.items() if _contains(items, reservation_id)),
            None,
        )
        if target is None:
            return reservations

    updated = dict(reservations)
    updated[target] = [r for r in reservations[target] if r.id != reservation_id]
    return updated


def reservations_for(reservations: ReservationMap, key: str) -> list[Reservation]:
    return reservations.get(key, [])


def slot_counts(reservations: ReservationMap, key: str) -> dict[SlotTime, int]:
    counts = {slot: 0 for slot in SlotTime}
    for r in reservations.get(key, []):
        counts[r.slot] += 1
    return counts
