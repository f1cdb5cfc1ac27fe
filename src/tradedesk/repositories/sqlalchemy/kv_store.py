"""SQLAlchemy-backed string key-value store."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from tradedesk.core.exceptions import StorageError
from tradedesk.repositories.sqlalchemy.orm_models import KeyValueORM

logger = logging.getLogger(__name__)


class SqlAlchemyKeyValueStore:
    """
    Minimal get/set store over the ``kv_store`` table.

    Each call runs in its own session and transaction, so a ``set`` either
    fully replaces the value or leaves the previous one.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key was never written."""
        try:
            with self._session_factory() as session:
                row = session.get(KeyValueORM, key)
                return row.value if row else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to read key {key}: {e}")
            raise StorageError(f"Failed to read {key}: {e}")

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under ``key``."""
        try:
            with self._session_factory() as session, session.begin():
                row = session.get(KeyValueORM, key)
                if row is None:
                    session.add(KeyValueORM(key=key, value=value))
                else:
                    row.value = value
        except SQLAlchemyError as e:
            logger.error(f"Failed to write key {key}: {e}")
            raise StorageError(f"Failed to write {key}: {e}")
