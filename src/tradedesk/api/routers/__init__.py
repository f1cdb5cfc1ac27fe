"""API routers package."""

from tradedesk.api.routers.journal import router as journal_router
from tradedesk.api.routers.portfolio import router as portfolio_router
from tradedesk.api.routers.prices import router as prices_router
from tradedesk.api.routers.trades import router as trades_router

__all__ = [
    "journal_router",
    "portfolio_router",
    "prices_router",
    "trades_router",
]
