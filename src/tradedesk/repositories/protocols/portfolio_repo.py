"""Portfolio item repository protocol."""

from typing import Any, Protocol

from tradedesk.domain.models import PortfolioItem


class PortfolioRepository(Protocol):
    """Interface for portfolio item data access."""

    def list_all(self) -> list[PortfolioItem]:
        """List all holdings (no particular order)."""
        ...

    def insert(self, item: PortfolioItem) -> None:
        """Persist a new holding."""
        ...

    def update(self, item_id: str, fields: dict[str, Any]) -> None:
        """Apply a partial update (domain attribute names)."""
        ...

    def delete(self, item_id: str) -> None:
        """Delete a holding."""
        ...
