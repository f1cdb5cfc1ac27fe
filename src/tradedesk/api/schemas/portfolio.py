"""Pydantic schemas for portfolio endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tradedesk.domain.models.enums import PortfolioCategory, AssetType


class PortfolioItemCreateRequest(BaseModel):
    """Request schema for adding a holding."""

    token: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    amount: float = Field(..., description="Quantity held")
    buy_price: float = Field(..., ge=0, description="Average cost basis")
    current_price: float = Field(..., ge=0, description="Manual fallback valuation")
    category: PortfolioCategory = PortfolioCategory.LIQUID
    asset_type: AssetType = AssetType.CRYPTO

    @field_validator("token")
    @classmethod
    def uppercase_token(cls, v: str) -> str:
        return v.strip().upper()


class PortfolioItemUpdateRequest(BaseModel):
    """Request schema for editing a holding (partial update)."""

    token: Optional[str] = Field(default=None, min_length=1, max_length=20)
    amount: Optional[float] = None
    buy_price: Optional[float] = Field(default=None, ge=0)
    current_price: Optional[float] = Field(default=None, ge=0)
    category: Optional[PortfolioCategory] = None
    asset_type: Optional[AssetType] = None

    @field_validator("token")
    @classmethod
    def uppercase_token(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v else None


class PortfolioItemResponse(BaseModel):
    """Response schema for a single holding."""

    model_config = {"from_attributes": True}

    id: str
    token: str
    amount: float
    buy_price: float
    current_price: float
    category: PortfolioCategory
    asset_type: AssetType


class PortfolioItemListResponse(BaseModel):
    """Response schema for listing holdings."""

    items: list[PortfolioItemResponse]
    count: int


class HoldingResponse(BaseModel):
    """A holding valued at its effective price."""

    model_config = {"from_attributes": True}

    id: str
    token: str
    amount: float
    category: PortfolioCategory
    asset_type: AssetType
    buy_price: float
    effective_price: float
    is_live: bool
    value: float
    invested: float
    pnl: float


class BreakdownItemResponse(BaseModel):
    model_config = {"from_attributes": True}

    label: str
    value: float
    percentage: float


class PortfolioSummaryResponse(BaseModel):
    """Response schema for portfolio valuation."""

    model_config = {"from_attributes": True}

    holdings: list[HoldingResponse]
    total_value: float
    total_invested: float
    total_pnl: float
    pnl_percent: float
    by_category: list[BreakdownItemResponse]
    by_asset_type: list[BreakdownItemResponse]
    as_of: Optional[datetime] = None


class PriceSnapshotResponse(BaseModel):
    """Response schema for the live-price map."""

    model_config = {"from_attributes": True}

    live_prices: dict[str, float]
    last_updated: Optional[datetime] = None
    is_refreshing: bool
