"""Trade domain model and PnL derivation rules."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from tradedesk.domain.models.enums import Direction, TradeStatus


def calculate_pnl(
    direction: Direction,
    entry_price: float,
    exit_price: float,
    size: float,
) -> float:
    """
    Realized PnL of a closed trade in currency units.

    Long:  (exit - entry) / entry * size
    Short: (entry - exit) / entry * size
    """
    if direction == Direction.LONG:
        return (exit_price - entry_price) / entry_price * size
    return (entry_price - exit_price) / entry_price * size


def infer_status(
    direction: Direction,
    entry_price: float,
    exit_price: float,
) -> TradeStatus:
    """Outcome implied by an exit price; Short inverts the comparison."""
    if exit_price == entry_price:
        return TradeStatus.BREAKEVEN
    went_up = exit_price > entry_price
    if direction == Direction.SHORT:
        went_up = not went_up
    return TradeStatus.WIN if went_up else TradeStatus.LOSS


@dataclass
class Trade:
    """
    Discrete trade log entry.

    ``pnl`` is derived: present iff status is not OPEN and an exit price
    exists. Call ``recompute_pnl`` after changing any input field.
    """

    id: str
    date: date
    ticker: str
    direction: Direction
    entry_price: float
    size: float
    exit_price: Optional[float] = None
    status: TradeStatus = TradeStatus.OPEN
    rationale: str = ""
    exit_reason: Optional[str] = None
    post_exit_reflection: Optional[str] = None
    pnl: Optional[float] = field(default=None)

    def __post_init__(self) -> None:
        self.ticker = self.ticker.upper()
        if isinstance(self.direction, str):
            self.direction = Direction(self.direction)
        if isinstance(self.status, str):
            self.status = TradeStatus(self.status)

    @property
    def is_open(self) -> bool:
        return self.status == TradeStatus.OPEN

    def recompute_pnl(self) -> Optional[float]:
        """Re-derive ``pnl`` from the current status, prices, and size."""
        if self.status != TradeStatus.OPEN and self.exit_price is not None:
            self.pnl = calculate_pnl(
                self.direction, self.entry_price, self.exit_price, self.size
            )
        else:
            self.pnl = None
        return self.pnl
