"""Pydantic schemas for API request/response."""

from tradedesk.api.schemas.journal import (
    JournalEntryCreateRequest,
    JournalEntryResponse,
    JournalEntryListResponse,
)
from tradedesk.api.schemas.portfolio import (
    PortfolioItemCreateRequest,
    PortfolioItemUpdateRequest,
    PortfolioItemResponse,
    PortfolioItemListResponse,
    HoldingResponse,
    BreakdownItemResponse,
    PortfolioSummaryResponse,
    PriceSnapshotResponse,
)
from tradedesk.api.schemas.trade import (
    TradeCreateRequest,
    TradeUpdateRequest,
    TradeResponse,
    TradeListResponse,
    PnlPointResponse,
    TradeStatsResponse,
)

__all__ = [
    "JournalEntryCreateRequest",
    "JournalEntryResponse",
    "JournalEntryListResponse",
    "PortfolioItemCreateRequest",
    "PortfolioItemUpdateRequest",
    "PortfolioItemResponse",
    "PortfolioItemListResponse",
    "HoldingResponse",
    "BreakdownItemResponse",
    "PortfolioSummaryResponse",
    "PriceSnapshotResponse",
    "TradeCreateRequest",
    "TradeUpdateRequest",
    "TradeResponse",
    "TradeListResponse",
    "PnlPointResponse",
    "TradeStatsResponse",
]
