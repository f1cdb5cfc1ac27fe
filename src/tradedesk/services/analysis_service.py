"""Analysis service for portfolio valuation and trade statistics."""

from collections import defaultdict
from typing import Mapping

from tradedesk.core.timezone import now_eastern
from tradedesk.domain.models import PortfolioItem, Trade, TradeStatus
from tradedesk.domain.views import (
    BreakdownItem,
    HoldingView,
    PnlPoint,
    PortfolioValuation,
    TradeStats,
)
from tradedesk.services.data_store import DataStore
from tradedesk.services.price_refresh_service import PriceRefreshService


def value_portfolio(
    items: list[PortfolioItem],
    live_prices: Mapping[str, float],
) -> PortfolioValuation:
    """
    Value holdings at their effective price.

    value = effective_price × amount, invested = buy_price × amount.
    """
    holdings: list[HoldingView] = []
    total_value = 0.0
    total_invested = 0.0
    by_category: dict[str, float] = defaultdict(float)
    by_asset_type: dict[str, float] = defaultdict(float)

    for item in items:
        price = item.effective_price(live_prices)
        value = price * item.amount
        invested = item.buy_price * item.amount
        holdings.append(
            HoldingView(
                id=item.id,
                token=item.token,
                amount=item.amount,
                category=item.category,
                asset_type=item.asset_type,
                buy_price=item.buy_price,
                effective_price=price,
                is_live=item.token.upper() in live_prices,
                value=value,
                invested=invested,
                pnl=value - invested,
            )
        )
        total_value += value
        total_invested += invested
        by_category[item.category.value] += value
        by_asset_type[item.asset_type.value] += value

    total_pnl = total_value - total_invested
    pnl_percent = total_pnl / total_invested * 100 if total_invested > 0 else 0.0

    return PortfolioValuation(
        holdings=holdings,
        total_value=total_value,
        total_invested=total_invested,
        total_pnl=total_pnl,
        pnl_percent=pnl_percent,
        by_category=_breakdown(by_category, total_value),
        by_asset_type=_breakdown(by_asset_type, total_value),
        as_of=now_eastern(),
    )


def trade_stats(trades: list[Trade]) -> TradeStats:
    """Realized PnL, win rate over closed trades, and a date-ascending PnL series."""
    closed = [t for t in trades if t.status != TradeStatus.OPEN]
    wins = sum(1 for t in trades if t.status == TradeStatus.WIN)
    losses = sum(1 for t in trades if t.status == TradeStatus.LOSS)
    series = [
        PnlPoint(date=t.date, ticker=t.ticker, pnl=t.pnl or 0.0)
        for t in sorted(trades, key=lambda t: t.date)
    ]
    return TradeStats(
        total_realized_pnl=sum(t.pnl for t in trades if t.pnl is not None),
        trades_taken=len(trades),
        closed_trades=len(closed),
        wins=wins,
        losses=losses,
        win_rate=wins / len(closed) * 100 if closed else 0.0,
        series=series,
    )


def _breakdown(values: dict[str, float], total: float) -> list[BreakdownItem]:
    items = [
        BreakdownItem(
            label=label,
            value=value,
            percentage=value / total * 100 if total else 0.0,
        )
        for label, value in values.items()
    ]
    items.sort(key=lambda x: x.value, reverse=True)
    return items


class AnalysisService:
    """
    Read-only summaries over the data store.

    Valuation always uses the live-price map as it is at call time.
    """

    def __init__(
        self,
        data_store: DataStore,
        price_refresher: PriceRefreshService,
    ):
        self._store = data_store
        self._prices = price_refresher

    def portfolio_valuation(self) -> PortfolioValuation:
        return value_portfolio(self._store.list_portfolio_items(), self._prices.live_prices)

    def trade_stats(self) -> TradeStats:
        return trade_stats(self._store.list_trades())
