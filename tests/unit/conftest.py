"""Shared pytest configuration for unit tests."""
import os
import sys
import uuid
from unittest.mock import Mock

import pytest
from google.api_core import exceptions as google_exceptions

# Ensure repo root is on sys.path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from taskflow.app import create_app
from taskflow.config.firebase_config import FirebaseContext
from taskflow.config.settings import Settings
from taskflow.services.identity_service import IdentityService
from taskflow.services.media_service import MediaService


# =====================================================
# In-memory Firestore double
# Documents are stored by full path, e.g. "users/u1/Tasks/t1"
# =====================================================
class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocumentRef:
    def __init__(self, db, path):
        self._db = db
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def collection(self, name):
        return FakeCollectionRef(self._db, f"{self.path}/{name}")

    def get(self):
        return FakeSnapshot(self.id, self._db.documents.get(self.path))

    def set(self, data):
        self._db.documents[self.path] = dict(data)

    def update(self, data):
        if self.path not in self._db.documents:
            raise google_exceptions.NotFound(f"No document to update: {self.path}")
        if not data:
            raise ValueError("Cannot update with an empty document.")
        self._db.documents[self.path].update(data)

    def delete(self):
        self._db.documents.pop(self.path, None)


class FakeCollectionRef:
    def __init__(self, db, path):
        self._db = db
        self.path = path

    def document(self, doc_id=None):
        if doc_id is None:
            doc_id = uuid.uuid4().hex[:20]
        if not doc_id:
            raise ValueError("A document must have an even number of path elements")
        return FakeDocumentRef(self._db, f"{self.path}/{doc_id}")

    def stream(self):
        prefix = self.path + "/"
        for path, data in list(self._db.documents.items()):
            rest = path[len(prefix):]
            if path.startswith(prefix) and "/" not in rest:
                yield FakeSnapshot(rest, data)


class FakeFirestore:
    def __init__(self):
        self.documents = {}

    def collection(self, name):
        return FakeCollectionRef(self, name)


class SettingsForTests(Settings):
    TESTING = True
    DEBUG = False
    DEV_MODE = False
    LOG_LEVEL = 'WARNING'
    STORAGE_BUCKET = 'test-bucket'
    FIREBASE_PROJECT_ID = 'test-project'
    CORS_ORIGINS = ['*']


@pytest.fixture
def fake_db():
    """Fresh in-memory Firestore for each test."""
    return FakeFirestore()


@pytest.fixture
def mock_identity():
    """Firebase Auth double; tests override return values or side effects."""
    identity = Mock(spec=IdentityService)
    identity.create_account.return_value = "uid-123"
    identity.get_account_by_email.return_value = "uid-123"
    identity.verify_token.return_value = {"uid": "uid-123"}
    return identity


@pytest.fixture
def mock_media():
    media = Mock(spec=MediaService)
    media.upload_profile_image.return_value = (
        "https://storage.googleapis.com/test-bucket/profileImages/uid-123_1700000000000.jpg"
    )
    return media


@pytest.fixture
def firebase_context(fake_db, mock_identity, mock_media):
    return FirebaseContext(db=fake_db, identity=mock_identity, media=mock_media)


@pytest.fixture
def app(firebase_context):
    """Flask app wired to the in-memory Firebase doubles."""
    return create_app(settings=SettingsForTests, context=firebase_context)


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def valid_task():
    return {
        "userId": "uid-123",
        "name": "New Task",
        "description": "A new task for testing",
        "date": "2024-11-19",
        "startTime": "10:00",
        "endTime": "12:00",
        "completed": False,
        "favorite": False,
        "tags": ["test"],
    }
