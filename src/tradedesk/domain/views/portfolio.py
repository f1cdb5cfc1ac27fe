"""View models for portfolio valuation and live pricing."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tradedesk.domain.models.enums import PortfolioCategory, AssetType


@dataclass
class HoldingView:
    """A holding valued at its effective price."""

    id: str
    token: str
    amount: float
    category: PortfolioCategory
    asset_type: AssetType
    buy_price: float
    effective_price: float
    is_live: bool
    value: float
    invested: float
    pnl: float


@dataclass
class BreakdownItem:
    """Share of total value held under one label (category or asset type)."""

    label: str
    value: float
    percentage: float


@dataclass
class PortfolioValuation:
    """Portfolio totals and per-holding detail."""

    holdings: list[HoldingView] = field(default_factory=list)
    total_value: float = 0.0
    total_invested: float = 0.0
    total_pnl: float = 0.0
    pnl_percent: float = 0.0
    by_category: list[BreakdownItem] = field(default_factory=list)
    by_asset_type: list[BreakdownItem] = field(default_factory=list)
    as_of: Optional[datetime] = None


@dataclass
class PriceSnapshot:
    """Copy of the live-price map and refresh state."""

    live_prices: dict[str, float] = field(default_factory=dict)
    last_updated: Optional[datetime] = None
    is_refreshing: bool = False
