import threading
from pathlib import Path

import pytest
from pymongo.errors import PyMongoError

from finder.core.json_store import JsonStoreHandle
from finder.core.store import StoreHandle
from finder.models.request_models import LabelScore
from main import create_app

FIXTURE_PATH = Path(__file__).resolve().parent / "fixtures" / "restaurants.json"


class FakeClassifier:
    def __init__(self, labels=None, error=None):
        self.labels = labels or []
        self.error = error
        self.calls = []

    def classify(self, image_bytes):
        self.calls.append(image_bytes)
        if self.error is not None:
            raise self.error
        return [LabelScore(**item) for item in self.labels]


class RecordingRepository:
    """Wraps a repository and records which queries were issued."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def __getattr__(self, name):
        attr = getattr(self.inner, name)

        def _recorded(*args, **kwargs):
            self.calls.append(name)
            return attr(*args, **kwargs)

        return _recorded


class RecordingStoreHandle(JsonStoreHandle):
    def _open(self):
        return RecordingRepository(super()._open())


class NeverReadyStore(StoreHandle):
    def _open(self):
        raise ConnectionError("store unreachable")


class SlowStore(StoreHandle):
    """Connect blocks until `release` is set, so the handle stays uninitialized."""

    def __init__(self):
        super().__init__()
        self.release = threading.Event()

    def _open(self):
        self.release.wait(timeout=10)
        raise ConnectionError("store unreachable")


class FailingRepository:
    """Every query fails the way a dropped MongoDB connection does."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            self.calls.append(name)
            raise PyMongoError("connection reset by peer")

        return _fail


class FailingStore(StoreHandle):
    def _open(self):
        return FailingRepository()


@pytest.fixture
def store():
    handle = RecordingStoreHandle(str(FIXTURE_PATH))
    handle.connect()
    yield handle
    handle.close()


@pytest.fixture
def classifier():
    return FakeClassifier()


@pytest.fixture
def app(store, classifier):
    app = create_app(store=store, classifier=classifier)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repo_calls(store):
    return store.repository().calls
