"""Domain layer - pure business models with no external dependencies."""

from tradedesk.domain.models import (
    JournalEntry,
    PortfolioItem,
    Trade,
    Sentiment,
    Direction,
    TradeStatus,
    PortfolioCategory,
    AssetType,
    calculate_pnl,
    infer_status,
)

__all__ = [
    "JournalEntry",
    "PortfolioItem",
    "Trade",
    "Sentiment",
    "Direction",
    "TradeStatus",
    "PortfolioCategory",
    "AssetType",
    "calculate_pnl",
    "infer_status",
]
