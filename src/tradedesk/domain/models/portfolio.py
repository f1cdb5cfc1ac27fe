"""PortfolioItem domain model."""

from dataclasses import dataclass
from typing import Mapping

from tradedesk.domain.models.enums import PortfolioCategory, AssetType


@dataclass
class PortfolioItem:
    """
    A single holding.

    ``current_price`` is the manually entered fallback valuation; the price
    actually used for valuation comes from ``effective_price``.
    """

    id: str
    token: str
    amount: float
    buy_price: float
    current_price: float
    category: PortfolioCategory = PortfolioCategory.LIQUID
    asset_type: AssetType = AssetType.CRYPTO

    def __post_init__(self) -> None:
        self.token = self.token.upper()
        if isinstance(self.category, str):
            self.category = PortfolioCategory(self.category)
        if self.asset_type is None:
            # Records written before asset_type existed are crypto
            self.asset_type = AssetType.CRYPTO
        elif isinstance(self.asset_type, str):
            self.asset_type = AssetType(self.asset_type)

    @property
    def is_crypto(self) -> bool:
        """Return True if this holding is priced from the crypto feed."""
        return self.asset_type == AssetType.CRYPTO

    def effective_price(self, live_prices: Mapping[str, float]) -> float:
        """Live price for the token if one is known, else the fallback price."""
        live = live_prices.get(self.token.upper())
        return live if live is not None else self.current_price
