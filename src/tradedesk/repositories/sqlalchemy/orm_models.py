"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime

from tradedesk.repositories.sqlalchemy.database import Base


class KeyValueORM(Base):
    """One stored collection: a fixed key and its JSON-serialized records."""

    __tablename__ = "kv_store"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
