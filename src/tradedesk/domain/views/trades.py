"""View models for trade log statistics."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class PnlPoint:
    """One bar of the chronological PnL series."""

    date: date
    ticker: str
    pnl: float


@dataclass
class TradeStats:
    """Aggregate figures over the trade log."""

    total_realized_pnl: float = 0.0
    trades_taken: int = 0
    closed_trades: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0
    series: list[PnlPoint] = field(default_factory=list)
