"""Repository protocol definitions (interfaces)."""

from tradedesk.repositories.protocols.journal_repo import JournalRepository
from tradedesk.repositories.protocols.portfolio_repo import PortfolioRepository
from tradedesk.repositories.protocols.trade_repo import TradeRepository

__all__ = [
    "JournalRepository",
    "PortfolioRepository",
    "TradeRepository",
]
