from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from taskpulse.config.settings import get_settings

DATABASE_URL = get_settings().DATABASE_URL

# SQLite needs cross-thread access because FastAPI runs sync routes in a pool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def create_tables(bind=None):
    """Create all tables registered on Base"""
    import taskpulse.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
