"""Pydantic schemas for journal endpoints."""

import datetime as dt

from pydantic import BaseModel, Field

from tradedesk.domain.models.enums import Sentiment


class JournalEntryCreateRequest(BaseModel):
    """Request schema for logging a market review."""

    date: dt.date = Field(..., description="Calendar day reviewed")
    macro_review: str = Field(..., description="Macro backdrop notes")
    alts_market: str = Field(..., description="Altcoin market notes")
    summary: str = Field(..., description="Takeaway for the day")
    sentiment: Sentiment


class JournalEntryResponse(BaseModel):
    """Response schema for a single journal entry."""

    model_config = {"from_attributes": True}

    id: str
    date: dt.date
    macro_review: str
    alts_market: str
    summary: str
    sentiment: Sentiment


class JournalEntryListResponse(BaseModel):
    """Response schema for listing journal entries."""

    entries: list[JournalEntryResponse]
    count: int
