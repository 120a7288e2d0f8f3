# tests/conftest.py - Shared test fixtures
import os
import tempfile

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-only"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["STORAGE_BACKEND"] = "json"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="taskpulse-uploads-")
os.environ["LOG_LEVEL"] = "WARNING"

from taskpulse.database import create_tables
from taskpulse.schemas import UserRecord, new_id, utcnow
from taskpulse.services.file_storage import FileStorageService, get_file_storage
from taskpulse.storage import ADMIN_USER_ID, JsonStore, SqlStore, avatar_url, get_store, seed_admin
from taskpulse.utils.security import create_access_token, hash_password
from main import app

TEST_PASSWORD = "password123"
MAX_TEST_UPLOAD = 1024


@pytest.fixture(params=["json", "sql"])
def store(request, tmp_path):
    """A seeded store; every API test runs against both backends"""
    if request.param == "json":
        json_store = JsonStore(tmp_path / "data")
        json_store.ensure_files()
        seed_admin(json_store)
        yield json_store
        return

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    sql_store = SqlStore(session)
    seed_admin(sql_store)
    yield sql_store
    sql_store.close()
    engine.dispose()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(store, upload_dir):
    """HTTP test client with the store and file storage overridden"""

    def override_get_store():
        yield store

    def override_get_file_storage():
        return FileStorageService(
            upload_dir=str(upload_dir),
            max_file_size=MAX_TEST_UPLOAD,
            allowed_extensions={".txt", ".png", ".pdf"},
        )

    app.dependency_overrides[get_store] = override_get_store
    app.dependency_overrides[get_file_storage] = override_get_file_storage
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(store, email: str, first_name: str = "Test", last_name: str = "User", role: str = "employee"):
    user = UserRecord(
        id=new_id(),
        email=email,
        first_name=first_name,
        last_name=last_name,
        password_hash=hash_password(TEST_PASSWORD),
        role=role,
        avatar=avatar_url(first_name, last_name),
        created_at=utcnow(),
    )
    store.users.add(user)
    return user


@pytest.fixture
def admin_user(store):
    return store.users.get(ADMIN_USER_ID)


@pytest.fixture
def test_user(store):
    return make_user(store, "alice@taskpulse.com", "Alice", "Walker")


@pytest.fixture
def other_user(store):
    return make_user(store, "bob@taskpulse.com", "Bob", "Stone")


@pytest.fixture
def lead_user(store):
    return make_user(store, "lena@taskpulse.com", "Lena", "Gray", role="team-lead")


def get_auth_headers(user) -> dict:
    """Generate auth headers for a user"""
    token = create_access_token({"sub": user.id})
    return {"Authorization": f"Bearer {token}"}


def create_task(client, user, **fields) -> dict:
    payload = {"title": "Write report", **fields}
    res = client.post("/api/tasks", json=payload, headers=get_auth_headers(user))
    assert res.status_code == 201, res.text
    return res.json()
