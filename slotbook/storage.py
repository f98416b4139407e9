"""
Persistence glue for the two records the app keeps.

``smart-reservations`` holds the whole ReservationMap in the durable
store; ``smart-user-obj`` holds the logged-in User in the session store.
Reads fail soft: anything unreadable is logged and treated as absent.
"""
import json
import logging
import os
from collections.abc import MutableMapping
from pathlib import Path

from .config import Settings
from .db import FirestoreStore, StorageError
from .models import (
    ReservationMap,
    User,
    reservation_map_from_json,
    reservation_map_to_json,
)

logger = logging.getLogger(__name__)

RESERVATIONS_KEY = "smart-reservations"
SESSION_USER_KEY = "smart-user-obj"


class FileStore:
    """All keys in one JSON object on disk, rewritten on every `set`."""

    def __init__(self, path):
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            raise StorageError(f"cannot read {self.path}: {err}") from err
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return data

    def _write_all(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, self.path)

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError:
            logger.warning("Overwriting unreadable storage file %s", self.path)
            data = {}
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)


class SessionStore:
    """
    Tab-scoped store over any mutable mapping.

    In the app the mapping is ``st.query_params``: the record rides in the
    tab's URL, so it survives a reload of that tab and goes away with it.
    Tests pass a dict.
    """

    def __init__(self, state: MutableMapping | None = None):
        self.state = {} if state is None else state

    def get(self, key: str) -> str | None:
        return self.state.get(key)

    def set(self, key: str, value: str) -> None:
        self.state[key] = value

    def remove(self, key: str) -> None:
        if key in self.state:
            del self.state[key]


def build_durable_store(settings: Settings):
    if settings.backend == "firestore":
        return FirestoreStore(settings.firestore_collection, project=settings.gcp_project)
    return FileStore(settings.data_file)


# ---- reservations (durable) -----------------------------------------
def load_reservations(store) -> ReservationMap:
    try:
        saved = store.get(RESERVATIONS_KEY)
        if saved is None:
            return {}
        return reservation_map_from_json(saved)
    except (ValueError, StorageError):
        logger.exception("Failed to load reservations")
        return {}


def persist_reservations(store, reservations: ReservationMap) -> None:
    store.set(RESERVATIONS_KEY, reservation_map_to_json(reservations))


# ---- session user ---------------------------------------------------
def save_user(store, user: User) -> None:
    store.set(SESSION_USER_KEY, user.model_dump_json())


def clear_user(store) -> None:
    store.remove(SESSION_USER_KEY)


def restore_session(store) -> User | None:
    saved = store.get(SESSION_USER_KEY)
    if saved is None:
        return None
    try:
        return User.model_validate_json(saved)
    except ValueError:
        logger.exception("Failed to restore session")
        return None
