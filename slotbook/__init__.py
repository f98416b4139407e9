"""
Package initialiser for the `slotbook` reservation package.

Re-exports the pieces the Streamlit app wires together so callers can do:

    from slotbook import ReservationController, SessionStore, build_durable_store
"""
from .config import Settings, configure_logging
from .controller import ReservationController, ViewState
from .db import FirestoreStore, StorageError
from .models import SLOTS, Gender, Reservation, ReservationMap, SlotTime, User
from .storage import FileStore, SessionStore, build_durable_store

__all__ = [
    "Settings", "configure_logging",
    "ReservationController", "ViewState",
    "FirestoreStore", "StorageError",
    "SLOTS", "Gender", "Reservation", "ReservationMap", "SlotTime", "User",
    "FileStore", "SessionStore", "build_durable_store",
]
