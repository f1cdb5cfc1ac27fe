"""Pydantic schemas for trade log endpoints."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tradedesk.domain.models.enums import Direction, TradeStatus


class TradeCreateRequest(BaseModel):
    """Request schema for logging a trade. pnl is derived, never accepted."""

    date: dt.date
    ticker: str = Field(..., min_length=1, max_length=20)
    direction: Direction
    entry_price: float = Field(..., description="Entry price (must be > 0)")
    size: float = Field(..., description="Notional size")
    exit_price: Optional[float] = Field(default=None, description="Null while the position is open")
    status: Optional[TradeStatus] = Field(
        default=None,
        description="Omit to infer from exit price (Open when there is none)",
    )
    rationale: str = ""
    exit_reason: Optional[str] = None
    post_exit_reflection: Optional[str] = None

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: str) -> str:
        return v.strip().upper()


class TradeUpdateRequest(BaseModel):
    """Request schema for editing a trade (partial update)."""

    date: Optional[dt.date] = None
    ticker: Optional[str] = Field(default=None, min_length=1, max_length=20)
    direction: Optional[Direction] = None
    entry_price: Optional[float] = None
    size: Optional[float] = None
    exit_price: Optional[float] = None
    status: Optional[TradeStatus] = None
    rationale: Optional[str] = None
    exit_reason: Optional[str] = None
    post_exit_reflection: Optional[str] = None

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v else None


class TradeResponse(BaseModel):
    """Response schema for a single trade."""

    model_config = {"from_attributes": True}

    id: str
    date: dt.date
    ticker: str
    direction: Direction
    entry_price: float
    exit_price: Optional[float] = None
    size: float
    status: TradeStatus
    rationale: str
    exit_reason: Optional[str] = None
    post_exit_reflection: Optional[str] = None
    pnl: Optional[float] = None


class TradeListResponse(BaseModel):
    """Response schema for listing trades."""

    trades: list[TradeResponse]
    count: int


class PnlPointResponse(BaseModel):
    model_config = {"from_attributes": True}

    date: dt.date
    ticker: str
    pnl: float


class TradeStatsResponse(BaseModel):
    """Response schema for trade log statistics."""

    model_config = {"from_attributes": True}

    total_realized_pnl: float
    trades_taken: int
    closed_trades: int
    wins: int
    losses: int
    win_rate: float
    series: list[PnlPointResponse]
