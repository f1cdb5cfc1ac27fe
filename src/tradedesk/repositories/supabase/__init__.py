"""Remote table storage backed by Supabase."""

from tradedesk.repositories.supabase.client import create_supabase_client
from tradedesk.repositories.supabase.table_repo import (
    JOURNAL_TABLE,
    PORTFOLIO_TABLE,
    TRADES_TABLE,
    SupabaseJournalRepository,
    SupabasePortfolioRepository,
    SupabaseTradeRepository,
)

__all__ = [
    "create_supabase_client",
    "JOURNAL_TABLE",
    "PORTFOLIO_TABLE",
    "TRADES_TABLE",
    "SupabaseJournalRepository",
    "SupabasePortfolioRepository",
    "SupabaseTradeRepository",
]
