"""SQLAlchemy repositories: one JSON array per collection in the key-value store."""

import json
import logging
from dataclasses import replace
from typing import Any, Callable, Generic, TypeVar

from tradedesk.core.exceptions import StorageError
from tradedesk.domain import seed
from tradedesk.domain.models import JournalEntry, PortfolioItem, Trade
from tradedesk.repositories.field_mapper import (
    JournalEntryMapper,
    PortfolioItemMapper,
    TradeMapper,
)
from tradedesk.repositories.sqlalchemy.kv_store import SqlAlchemyKeyValueStore

logger = logging.getLogger(__name__)

JOURNAL_KEY = "journalEntries"
PORTFOLIO_KEY = "portfolioItems"
TRADES_KEY = "trades"

T = TypeVar("T")


class SqlAlchemyCollectionRepository(Generic[T]):
    """
    Whole-collection persistence under a single key.

    Reads fall back to built-in sample data when the key has never been
    written. Every mutation serializes the entire updated collection.
    """

    def __init__(
        self,
        store: SqlAlchemyKeyValueStore,
        key: str,
        mapper: Any,
        seed_factory: Callable[[], list[T]],
    ):
        self._store = store
        self._key = key
        self._mapper = mapper
        self._seed_factory = seed_factory

    def list_all(self) -> list[T]:
        raw = self._store.get(self._key)
        if raw is None:
            logger.info(f"No stored {self._key}; using built-in sample data")
            return self._seed_factory()
        try:
            rows = json.loads(raw)
            return [self._mapper.db_to_model(row) for row in rows]
        except (ValueError, KeyError, TypeError) as e:
            raise StorageError(f"Corrupt {self._key} record: {e}")

    def insert(self, record: T) -> None:
        self._save([record] + self.list_all())

    def update(self, record_id: str, fields: dict[str, Any]) -> None:
        records = [
            replace(r, **fields) if r.id == record_id else r
            for r in self.list_all()
        ]
        self._save(records)

    def delete(self, record_id: str) -> None:
        self._save([r for r in self.list_all() if r.id != record_id])

    def _save(self, records: list[T]) -> None:
        payload = json.dumps([self._mapper.model_to_db(r) for r in records])
        self._store.set(self._key, payload)


class SqlAlchemyJournalRepository(SqlAlchemyCollectionRepository[JournalEntry]):
    """Journal entries stored under ``journalEntries``."""

    def __init__(self, store: SqlAlchemyKeyValueStore):
        super().__init__(store, JOURNAL_KEY, JournalEntryMapper, seed.default_journal_entries)


class SqlAlchemyPortfolioRepository(SqlAlchemyCollectionRepository[PortfolioItem]):
    """Portfolio items stored under ``portfolioItems``."""

    def __init__(self, store: SqlAlchemyKeyValueStore):
        super().__init__(store, PORTFOLIO_KEY, PortfolioItemMapper, seed.default_portfolio_items)


class SqlAlchemyTradeRepository(SqlAlchemyCollectionRepository[Trade]):
    """Trades stored under ``trades``."""

    def __init__(self, store: SqlAlchemyKeyValueStore):
        super().__init__(store, TRADES_KEY, TradeMapper, seed.default_trades)

    def delete_all(self) -> None:
        self._save([])
