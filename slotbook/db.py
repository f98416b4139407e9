"""
Firestore-backed key/value store, the remote stand-in for the browser's
``localStorage``.

Each record lives in its own document of one collection: the document ID
is the storage key (e.g. ``smart-reservations``) and the JSON text sits in
a single ``value`` field.

Classes
-------
FirestoreStore(collection="kv", client=None, project=None)
    ``get`` / ``set`` / ``remove`` over that collection.  The client is
    built lazily with Application Default Credentials (ADC), so the same
    code runs locally and on Cloud Run.

StorageError
    Raised when Firestore itself fails (network, permissions).
"""

from google.cloud import firestore
from google.cloud import exceptions as gexc


class StorageError(RuntimeError):
    """A durable store could not be read or written."""


class FirestoreStore:
    def __init__(self, collection: str = "kv", client=None, project: str | None = None):
        self.collection = collection
        self._client = client
        self._project = project

    @property
    def client(self):
        # project ID inferred from ADC unless given explicitly
        if self._client is None:
            self._client = firestore.Client(project=self._project)
        return self._client

    def _ref(self, key: str):
        return self.client.collection(self.collection).document(key)

    def get(self, key: str) -> str | None:
        try:
            snapshot = self._ref(key).get()
        except gexc.GoogleCloudError as err:          # network / perms
            raise StorageError(f"Firestore error: {err}") from err
        if not snapshot.exists:
            return None
        return (snapshot.to_dict() or {}).get("value")

    def set(self, key: str, value: str) -> None:
        try:
            self._ref(key).set({"value": value})
        except gexc.GoogleCloudError as err:
            raise StorageError(f"Firestore error: {err}") from err

    def remove(self, key: str) -> None:
        try:
            self._ref(key).delete()
        except gexc.GoogleCloudError as err:
            raise StorageError(f"Firestore error: {err}") from err
