"""Service layer - business logic orchestration."""

from tradedesk.services.data_store import (
    DataStore,
    JournalEntryCreate,
    PortfolioItemCreate,
    PortfolioItemUpdate,
    TradeCreate,
    TradeUpdate,
)
from tradedesk.services.price_refresh_service import PriceRefreshService
from tradedesk.services.analysis_service import AnalysisService

__all__ = [
    "DataStore",
    "JournalEntryCreate",
    "PortfolioItemCreate",
    "PortfolioItemUpdate",
    "TradeCreate",
    "TradeUpdate",
    "PriceRefreshService",
    "AnalysisService",
]
