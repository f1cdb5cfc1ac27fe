"""Core utilities and shared functionality."""

from tradedesk.core.timezone import (
    now_eastern,
    parse_date,
    EASTERN_TZ,
)
from tradedesk.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    StorageError,
    PriceFeedError,
)

__all__ = [
    "now_eastern",
    "parse_date",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    "PriceFeedError",
]
