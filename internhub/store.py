"""
The collection store: named slots holding whole JSON arrays.

Every collection ("jobs", "users", ...) lives in one row of kv_store as a
JSON string. Reads parse the whole array, writes replace the whole array.
There is no locking and no merging: if two writers read the same snapshot
and both write, the second write wins and the first one's changes are lost.

Also home of new_id(), the id generator every repository uses.
"""

import json
import threading
import time
from typing import Any, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from internhub.database import SessionLocal
from internhub.models import StoredValue

logger = structlog.get_logger(__name__)

# ─── Slot names ──────────────────────────────────────────────────────

USERS = "users"
JOBS = "jobs"
APPLICATIONS = "applications"
NOTIFICATIONS = "notifications"
HACKATHONS = "hackathons"
COURSES = "courses"
RESOURCES = "resources"
ANNOUNCEMENTS = "announcements"
SUPPORT_TICKETS = "support_tickets"

COLLECTION_KEYS = (
    USERS, JOBS, APPLICATIONS, NOTIFICATIONS, HACKATHONS,
    COURSES, RESOURCES, ANNOUNCEMENTS, SUPPORT_TICKETS,
)

# Bearer credential for the remote auth backend (a plain string, not an array)
TOKEN = "token"


# ─── Ids ─────────────────────────────────────────────────────────────

_id_lock = threading.Lock()
_last_id_ms = 0


def new_id(prefix: str) -> str:
    """
    Return prefix + current epoch milliseconds, e.g. "j1767225600000".

    Two calls in the same millisecond would collide, so within this process
    the number is bumped to stay strictly increasing.
    """
    global _last_id_ms
    with _id_lock:
        now_ms = int(time.time() * 1000)
        _last_id_ms = max(now_ms, _last_id_ms + 1)
        return f"{prefix}{_last_id_ms}"


# ─── Store ───────────────────────────────────────────────────────────

class CollectionStore:
    """Get/set whole collections (and raw string slots) over one DB session."""

    def __init__(self, db: Session):
        self.db = db

    @classmethod
    def open(cls, db: Session, seed: bool = True) -> "CollectionStore":
        """Create a store and make sure every collection exists."""
        from internhub.seed import ensure_seeded

        store = cls(db)
        if seed:
            ensure_seeded(store)
        return store

    # Raw slots

    def has(self, key: str) -> bool:
        return self.db.scalar(select(StoredValue.key).where(StoredValue.key == key)) is not None

    def get_value(self, key: str) -> Optional[str]:
        return self.db.scalar(select(StoredValue.value).where(StoredValue.key == key))

    def set_value(self, key: str, value: str) -> None:
        """Write a slot in one commit. On failure the old value stays and the error propagates."""
        row = self.db.get(StoredValue, key)
        if row is None:
            self.db.add(StoredValue(key=key, value=value))
        else:
            row.value = value
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error("store_write_failed", key=key)
            raise

    def delete_value(self, key: str) -> None:
        row = self.db.get(StoredValue, key)
        if row is not None:
            self.db.delete(row)
            self.db.commit()

    # Collections

    def get_collection(self, key: str) -> list[dict[str, Any]]:
        """The stored array, or [] if the slot is missing or holds something unreadable."""
        raw = self.get_value(key)
        if raw is None:
            return []
        try:
            items = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("corrupt_collection", key=key)
            return []
        if not isinstance(items, list):
            logger.warning("corrupt_collection", key=key, found=type(items).__name__)
            return []
        return items

    def set_collection(self, key: str, items: list[dict[str, Any]]) -> None:
        """Replace the whole collection."""
        self.set_value(key, json.dumps(items))
        logger.debug("collection_written", key=key, count=len(items))


def get_store():
    """
    FastAPI dependency: yields a CollectionStore on a fresh session, then closes it.
    Usage in a route:  def my_route(store: CollectionStore = Depends(get_store))
    """
    db = SessionLocal()
    try:
        yield CollectionStore(db)
    finally:
        db.close()
