import pytest
from google.cloud import exceptions as gexc

from slotbook.models import Gender, User


@pytest.fixture
def kim():
    return User(name="Kim", gender=Gender.MALE)


@pytest.fixture
def lee():
    return User(name="Lee", gender=Gender.FEMALE)


class FakeSnapshot:
    def __init__(self, data):
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, docs, key, error=None):
        self.docs, self.key, self.error = docs, key, error

    def _check(self):
        if self.error is not None:
            raise self.error

    def get(self):
        self._check()
        return FakeSnapshot(self.docs.get(self.key))

    def set(self, data):
        self._check()
        self.docs[self.key] = dict(data)

    def delete(self):
        self._check()
        self.docs.pop(self.key, None)


class FakeFirestoreClient:
    """Just enough of google.cloud.firestore.Client for FirestoreStore."""

    def __init__(self, error=None):
        self.collections = {}
        self.error = error

    def collection(self, name):
        docs = self.collections.setdefault(name, {})
        client = self

        class _Collection:
            def document(self, key):
                return FakeDocument(docs, key, client.error)

        return _Collection()


@pytest.fixture
def fake_firestore():
    return FakeFirestoreClient()


@pytest.fixture
def failing_firestore():
    return FakeFirestoreClient(error=gexc.GoogleCloudError("unavailable"))
