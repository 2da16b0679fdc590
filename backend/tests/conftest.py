import sys
import pytest
from pathlib import Path

# Add project root (2 levels up from tests/) to sys.path so tests can import 'app'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.main import create_app
from app.services.connection import ConnectionManager
from app.services.message_router import MessageRouter
from app.services.user_store import UserStore


@pytest.fixture
def users_file(tmp_path):
    """Path of a users file inside a per-test temp dir (not created yet)."""
    return tmp_path / "users.json"


@pytest.fixture
def store(users_file):
    return UserStore.load(users_file)


@pytest.fixture
def connections():
    return ConnectionManager()


@pytest.fixture
def message_router(store, connections):
    return MessageRouter(store, connections)


@pytest.fixture
def app(users_file):
    """A fresh app bound to the temp users file."""
    return create_app(Settings(USERS_FILE=str(users_file)))


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which builds the store.
    with TestClient(app) as c:
        yield c
