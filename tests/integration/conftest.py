"""Shared pytest configuration for integration tests.

These tests talk to the Firebase emulators; start them with
`firebase emulators:start --only auth,firestore` first.
"""
import os
import socket
import sys
import uuid

import pytest
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Ensure repo root is on sys.path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

FIRESTORE_HOST = os.environ.setdefault("FIRESTORE_EMULATOR_HOST", "localhost:8080")
AUTH_HOST = os.environ.setdefault("FIREBASE_AUTH_EMULATOR_HOST", "localhost:9099")
# The Admin SDK needs a project id to talk to the emulators
os.environ.setdefault("GCLOUD_PROJECT", "demo-taskflow")


def _emulator_running(host):
    hostname, port = host.split(":")
    try:
        with socket.create_connection((hostname, int(port)), timeout=1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when the emulators are not reachable."""
    firestore_running = _emulator_running(FIRESTORE_HOST)
    auth_running = _emulator_running(AUTH_HOST)
    if firestore_running and auth_running:
        return

    skip_marker = pytest.mark.skip(
        reason=f"Firebase emulators not running. Start with: firebase emulators:start\n"
               f"  Firestore ({FIRESTORE_HOST}): {'running' if firestore_running else 'not running'}\n"
               f"  Auth ({AUTH_HOST}): {'running' if auth_running else 'not running'}"
    )
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(skip_marker)


@pytest.fixture(scope="session")
def app():
    """Flask application wired to the emulators."""
    from taskflow.app import create_app
    from taskflow.config.settings import Settings

    class EmulatorSettings(Settings):
        TESTING = True
        DEV_MODE = False
        FIREBASE_PROJECT_ID = os.environ["GCLOUD_PROJECT"]
        STORAGE_BUCKET = None

    app = create_app(settings=EmulatorSettings)
    if app.extensions.get("firebase") is None:
        pytest.skip("Firebase could not be initialized against the emulators")
    return app


@pytest.fixture
def client(app):
    """Create Flask test client."""
    return app.test_client()


@pytest.fixture
def new_user(client):
    """Register a throwaway account and return its uid and email."""
    email = f"it-{uuid.uuid4().hex[:10]}@example.com"
    res = client.post("/auth/register", json={"email": email, "password": "secret123", "name": "Integration"})
    assert res.status_code == 201, res.get_json()
    return {"uid": res.get_json()["uid"], "email": email}
