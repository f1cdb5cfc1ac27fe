"""Repository layer - data access abstractions and implementations."""

from tradedesk.repositories.protocols import (
    JournalRepository,
    PortfolioRepository,
    TradeRepository,
)
from tradedesk.repositories.factory import Repositories, create_repositories

__all__ = [
    "JournalRepository",
    "PortfolioRepository",
    "TradeRepository",
    "Repositories",
    "create_repositories",
]
