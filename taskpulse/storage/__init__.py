import logging
from urllib.parse import quote_plus

from taskpulse.config.settings import get_settings
from taskpulse.schemas import UserRecord, utcnow
from taskpulse.storage.base import Store
from taskpulse.storage.json_store import JsonStore
from taskpulse.storage.sql_store import SqlStore

logger = logging.getLogger(__name__)

ADMIN_USER_ID = "1"


def avatar_url(first_name: str, last_name: str) -> str:
    return f"https://ui-avatars.com/api/?name={quote_plus(first_name)}+{quote_plus(last_name)}"


def seed_admin(store: Store) -> bool:
    """Create the default admin account when the user collection is empty"""
    from taskpulse.utils.security import hash_password

    if store.users.list():
        return False

    settings = get_settings()
    store.users.add(UserRecord(
        id=ADMIN_USER_ID,
        email=settings.ADMIN_EMAIL,
        first_name="Admin",
        last_name="User",
        password_hash=hash_password(settings.ADMIN_PASSWORD),
        role="admin",
        avatar=avatar_url("Admin", "User"),
        created_at=utcnow(),
    ))
    logger.info(f"Seeded admin user {settings.ADMIN_EMAIL}")
    return True


def open_store() -> Store:
    settings = get_settings()
    if settings.STORAGE_BACKEND == "sql":
        from taskpulse.database import SessionLocal
        return SqlStore(SessionLocal())
    if settings.STORAGE_BACKEND != "json":
        raise ValueError(f"Unknown STORAGE_BACKEND '{settings.STORAGE_BACKEND}'")
    return JsonStore(settings.DATA_DIR)


def get_store():
    """FastAPI dependency yielding the configured store"""
    store = open_store()
    try:
        yield store
    finally:
        store.close()


def init_storage() -> None:
    """Prepare the configured backend and seed the admin user"""
    settings = get_settings()
    if settings.STORAGE_BACKEND == "sql":
        from taskpulse.database import create_tables
        create_tables()
    store = open_store()
    try:
        if isinstance(store, JsonStore):
            store.ensure_files()
        seed_admin(store)
    finally:
        store.close()
    logger.info(f"Storage ready ({settings.STORAGE_BACKEND})")
