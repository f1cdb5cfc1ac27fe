"""SQLAlchemy implementation of the local key-value fallback (SQLite)."""

from tradedesk.repositories.sqlalchemy.database import (
    Base,
    get_engine,
    get_session_factory,
    init_db,
    reset_database,
)
from tradedesk.repositories.sqlalchemy.kv_store import SqlAlchemyKeyValueStore
from tradedesk.repositories.sqlalchemy.collection_repo import (
    JOURNAL_KEY,
    PORTFOLIO_KEY,
    TRADES_KEY,
    SqlAlchemyJournalRepository,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyTradeRepository,
)

__all__ = [
    "Base",
    "get_engine",
    "get_session_factory",
    "init_db",
    "reset_database",
    "SqlAlchemyKeyValueStore",
    "JOURNAL_KEY",
    "PORTFOLIO_KEY",
    "TRADES_KEY",
    "SqlAlchemyJournalRepository",
    "SqlAlchemyPortfolioRepository",
    "SqlAlchemyTradeRepository",
]
