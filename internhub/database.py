"""
Database setup using SQLAlchemy.

- engine: the connection to the key/value store
- SessionLocal: creates a new database session (used per-request in FastAPI)
- Base: all ORM models inherit from this
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from internhub.config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool workers
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# Create the database engine from our connection string
engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args(settings.DATABASE_URL))

# Each call to SessionLocal() gives us a fresh database session
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Base class for our ORM models (just the key/value table)
Base = declarative_base()
