"""Supabase-based repository implementations.

Each operation is one round trip against a table keyed by ``id``.
"""

import logging
from typing import Any, Generic, TypeVar

from supabase import Client

from tradedesk.core.exceptions import StorageError
from tradedesk.domain.models import JournalEntry, PortfolioItem, Trade
from tradedesk.repositories.field_mapper import (
    JournalEntryMapper,
    PortfolioItemMapper,
    TradeMapper,
)

logger = logging.getLogger(__name__)

JOURNAL_TABLE = "journal_entries"
PORTFOLIO_TABLE = "portfolio_items"
TRADES_TABLE = "trades"

# PostgREST refuses an unfiltered DELETE; no real row carries this id
_DELETE_ALL_SENTINEL = "00000000-0000-0000-0000-000000000000"

T = TypeVar("T")


class SupabaseTableRepository(Generic[T]):
    """Generic CRUD over one Supabase table."""

    def __init__(
        self,
        client: Client,
        table: str,
        mapper: Any,
        order_by_date: bool = False,
    ):
        self._client = client
        self._table = table
        self._mapper = mapper
        self._order_by_date = order_by_date

    def list_all(self) -> list[T]:
        try:
            query = self._client.table(self._table).select("*")
            if self._order_by_date:
                query = query.order("date", desc=True)
            result = query.execute()
        except Exception as e:
            logger.error(f"Failed to list {self._table}: {e}")
            raise StorageError(f"Failed to list {self._table}: {e}")
        return [self._mapper.db_to_model(row) for row in result.data or []]

    def insert(self, record: T) -> None:
        row = self._mapper.model_to_db(record)
        try:
            self._client.table(self._table).insert(row).execute()
        except Exception as e:
            logger.error(f"Failed to insert into {self._table}: {e}")
            raise StorageError(f"Failed to insert into {self._table}: {e}")
        logger.debug(f"Inserted {row['id']} into {self._table}")

    def update(self, record_id: str, fields: dict[str, Any]) -> None:
        row = self._mapper.fields_to_db(fields)
        try:
            self._client.table(self._table).update(row).eq("id", record_id).execute()
        except Exception as e:
            logger.error(f"Failed to update {record_id} in {self._table}: {e}")
            raise StorageError(f"Failed to update {self._table}: {e}")

    def delete(self, record_id: str) -> None:
        try:
            self._client.table(self._table).delete().eq("id", record_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete {record_id} from {self._table}: {e}")
            raise StorageError(f"Failed to delete from {self._table}: {e}")


class SupabaseJournalRepository(SupabaseTableRepository[JournalEntry]):
    def __init__(self, client: Client):
        super().__init__(client, JOURNAL_TABLE, JournalEntryMapper, order_by_date=True)


class SupabasePortfolioRepository(SupabaseTableRepository[PortfolioItem]):
    def __init__(self, client: Client):
        super().__init__(client, PORTFOLIO_TABLE, PortfolioItemMapper)


class SupabaseTradeRepository(SupabaseTableRepository[Trade]):
    def __init__(self, client: Client):
        super().__init__(client, TRADES_TABLE, TradeMapper, order_by_date=True)

    def delete_all(self) -> None:
        """Delete every trade with a single filtered request."""
        try:
            self._client.table(self._table).delete().neq("id", _DELETE_ALL_SENTINEL).execute()
        except Exception as e:
            logger.error(f"Failed to clear {self._table}: {e}")
            raise StorageError(f"Failed to clear {self._table}: {e}")
