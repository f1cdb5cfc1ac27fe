"""Trade repository protocol."""

from typing import Any, Protocol

from tradedesk.domain.models import Trade


class TradeRepository(Protocol):
    """Interface for trade log data access."""

    def list_all(self) -> list[Trade]:
        """List all trades, newest first."""
        ...

    def insert(self, trade: Trade) -> None:
        """Persist a new trade."""
        ...

    def update(self, trade_id: str, fields: dict[str, Any]) -> None:
        """Apply a partial update, including the derived pnl."""
        ...

    def delete(self, trade_id: str) -> None:
        """Delete a trade."""
        ...

    def delete_all(self) -> None:
        """Delete every trade in one operation."""
        ...
