"""
SQLAlchemy ORM model for the key/value store.

One table:
- kv_store: one row per named slot ("jobs", "users", "token", ...).
  Collections are stored as a JSON array string and always rewritten whole.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from internhub.database import Base


class StoredValue(Base):
    __tablename__ = "kv_store"

    key = Column(String(64), primary_key=True)                  # e.g. "jobs", "support_tickets"
    value = Column(Text, nullable=False)                        # serialized JSON (or a raw token)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
