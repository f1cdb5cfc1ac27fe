"""Enumerations for domain models."""

from enum import Enum


class Sentiment(str, Enum):
    """Market read recorded with a journal entry."""

    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"
    MIXED = "Mixed"


class Direction(str, Enum):
    """Side of a trade."""

    LONG = "Long"
    SHORT = "Short"


class TradeStatus(str, Enum):
    """Lifecycle status of a trade. OPEN is initial."""

    OPEN = "Open"
    WIN = "Win"
    LOSS = "Loss"
    BREAKEVEN = "Breakeven"


class PortfolioCategory(str, Enum):
    """How a holding is held."""

    LIQUID = "Liquid"
    VESTED = "Vested"
    FARMING = "Farming"


class AssetType(str, Enum):
    """Instrument class; decides how a holding is priced."""

    CRYPTO = "Crypto"
    STOCK = "Stock"
