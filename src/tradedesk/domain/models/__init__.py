"""Domain models package."""

from tradedesk.domain.models.enums import (
    Sentiment,
    Direction,
    TradeStatus,
    PortfolioCategory,
    AssetType,
)
from tradedesk.domain.models.journal import JournalEntry
from tradedesk.domain.models.portfolio import PortfolioItem
from tradedesk.domain.models.trade import Trade, calculate_pnl, infer_status

__all__ = [
    "Sentiment",
    "Direction",
    "TradeStatus",
    "PortfolioCategory",
    "AssetType",
    "JournalEntry",
    "PortfolioItem",
    "Trade",
    "calculate_pnl",
    "infer_status",
]
