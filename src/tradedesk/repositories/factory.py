"""Storage strategy selection."""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import sessionmaker

from tradedesk.config.settings import Settings
from tradedesk.repositories.protocols import (
    JournalRepository,
    PortfolioRepository,
    TradeRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """The three collection repositories of one storage strategy."""

    backend: str
    journal: JournalRepository
    portfolio: PortfolioRepository
    trades: TradeRepository


def create_repositories(
    settings: Settings,
    session_factory: Optional[sessionmaker] = None,
) -> Repositories:
    """
    Pick the storage strategy for the process lifetime.

    Remote Supabase tables when both URL and key are configured, otherwise
    the local key-value fallback.
    """
    if settings.remote_storage_configured:
        from tradedesk.repositories.supabase import (
            create_supabase_client,
            SupabaseJournalRepository,
            SupabasePortfolioRepository,
            SupabaseTradeRepository,
        )

        client = create_supabase_client(settings.supabase_url, settings.supabase_anon_key)
        logger.info("Using remote Supabase storage")
        return Repositories(
            backend="supabase",
            journal=SupabaseJournalRepository(client),
            portfolio=SupabasePortfolioRepository(client),
            trades=SupabaseTradeRepository(client),
        )

    from tradedesk.repositories.sqlalchemy import (
        init_db,
        get_session_factory,
        SqlAlchemyKeyValueStore,
        SqlAlchemyJournalRepository,
        SqlAlchemyPortfolioRepository,
        SqlAlchemyTradeRepository,
    )

    if session_factory is None:
        init_db()
        session_factory = get_session_factory()
    store = SqlAlchemyKeyValueStore(session_factory)
    logger.info("Using local key-value storage")
    return Repositories(
        backend="local",
        journal=SqlAlchemyJournalRepository(store),
        portfolio=SqlAlchemyPortfolioRepository(store),
        trades=SqlAlchemyTradeRepository(store),
    )
