"""View models for service outputs."""

from tradedesk.domain.views.portfolio import (
    HoldingView,
    BreakdownItem,
    PortfolioValuation,
    PriceSnapshot,
)
from tradedesk.domain.views.trades import PnlPoint, TradeStats

__all__ = [
    "HoldingView",
    "BreakdownItem",
    "PortfolioValuation",
    "PriceSnapshot",
    "PnlPoint",
    "TradeStats",
]
