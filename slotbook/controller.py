"""
Top-level controller: owns the session user, the reservation map and the
transient view state, and writes the map back after every change.
"""
import logging
from dataclasses import dataclass, field
from datetime import date

from . import operations, storage
from .dates import date_key, shift_month
from .models import Reservation, ReservationMap, SlotTime, User

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    current_date: date = field(default_factory=date.today)  # month cursor
    selected_date: date = field(default_factory=date.today)
    is_modal_open: bool = False
    target_slot: SlotTime | None = None


class ReservationController:
    def __init__(self, session_store, durable_store, view: ViewState | None = None):
        self.session_store = session_store
        self.durable_store = durable_store
        self.view = view or ViewState()
        self.user: User | None = None
        self.reservations: ReservationMap = {}

    def restore(self) -> None:
        """Hydrate both stores; called once at startup."""
        self.reservations = storage.load_reservations(self.durable_store)
        self.user = storage.restore_session(self.session_store)

    # ---- session ----------------------------------------------------
    def login(self, user: User) -> None:
        self.user = user
        storage.save_user(self.session_store, user)
        logger.info("Logged in as %s", user.name)

    def logout(self) -> None:
        self.user = None
        storage.clear_user(self.session_store)

    # ---- view -------------------------------------------------------
    @property
    def selected_key(self) -> str:
        return date_key(self.view.selected_date)

    def select_date(self, day: date) -> None:
        self.view.selected_date = day

    def change_month(self, offset: int) -> None:
        self.view.current_date = shift_month(self.view.current_date, offset)

    def open_add_modal(self, slot: SlotTime) -> None:
        self.view.target_slot = slot
        self.view.is_modal_open = True

    def close_modal(self) -> None:
        self.view.is_modal_open = False

    # ---- reservations -----------------------------------------------
    def _commit(self, updated: ReservationMap) -> bool:
        if updated is self.reservations:
            return False
        self.reservations = updated
        storage.persist_reservations(self.durable_store, updated)
        return True

    def submit(self) -> Reservation | None:
        """Book the pending slot on the selected date and close the modal."""
        key = self.selected_key
        changed = self._commit(
            operations.add_reservation(self.reservations, key, self.user, self.view.target_slot)
        )
        if not changed:
            return None
        self.view.is_modal_open = False
        created = self.reservations[key][-1]
        logger.info("Reserved %s on %s for %s (%s)", created.slot.value, key, created.name, created.id)
        return created

    def delete(self, reservation_id: str) -> bool:
        changed = self._commit(
            operations.delete_reservation(self.reservations, reservation_id, self.selected_key)
        )
        if changed:
            logger.info("Deleted reservation %s", reservation_id)
        return changed

    def current_reservations(self) -> list[Reservation]:
        return operations.reservations_for(self.reservations, self.selected_key)
