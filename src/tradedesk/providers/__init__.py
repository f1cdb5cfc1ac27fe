"""Market data providers module."""

from tradedesk.providers.price_feed import PriceFeed
from tradedesk.providers.cryptocompare_provider import CryptoComparePriceFeed
from tradedesk.providers.synthetic_provider import SyntheticPriceWalk

__all__ = [
    "PriceFeed",
    "CryptoComparePriceFeed",
    "SyntheticPriceWalk",
]
