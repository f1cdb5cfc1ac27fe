"""Field mapping between domain models and stored records.

Both storage strategies keep records with the camelCase column names of
the remote schema, so a local file and a remote table row look the same.
"""

import logging
from datetime import date
from enum import Enum
from typing import Any, Optional

from tradedesk.core.timezone import parse_date
from tradedesk.domain.models import JournalEntry, PortfolioItem, Trade

logger = logging.getLogger(__name__)


def _to_db_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


class _RecordMapper:
    """Attribute name -> column name translation shared by all mappers."""

    columns: dict[str, str] = {}

    @classmethod
    def fields_to_db(cls, fields: dict[str, Any]) -> dict[str, Any]:
        """Convert a partial update (domain attribute names) to column names."""
        row = {}
        for name, value in fields.items():
            column = cls.columns.get(name)
            if column is None:
                raise KeyError(f"Unknown field for {cls.__name__}: {name}")
            row[column] = _to_db_value(value)
        return row

    @classmethod
    def model_to_db(cls, model: Any) -> dict[str, Any]:
        return cls.fields_to_db({name: getattr(model, name) for name in cls.columns})


class JournalEntryMapper(_RecordMapper):
    """Maps JournalEntry <-> journal_entries row."""

    columns = {
        "id": "id",
        "date": "date",
        "macro_review": "macroReview",
        "alts_market": "altsMarket",
        "summary": "summary",
        "sentiment": "sentiment",
    }

    @staticmethod
    def db_to_model(row: dict[str, Any]) -> JournalEntry:
        return JournalEntry(
            id=str(row["id"]),
            date=parse_date(row["date"]),
            macro_review=row.get("macroReview") or "",
            alts_market=row.get("altsMarket") or "",
            summary=row.get("summary") or "",
            sentiment=row["sentiment"],
        )


class PortfolioItemMapper(_RecordMapper):
    """Maps PortfolioItem <-> portfolio_items row."""

    columns = {
        "id": "id",
        "token": "token",
        "amount": "amount",
        "buy_price": "buyPrice",
        "current_price": "currentPrice",
        "category": "category",
        "asset_type": "assetType",
    }

    @staticmethod
    def db_to_model(row: dict[str, Any]) -> PortfolioItem:
        return PortfolioItem(
            id=str(row["id"]),
            token=row["token"],
            amount=float(row.get("amount") or 0),
            buy_price=float(row.get("buyPrice") or 0),
            current_price=float(row.get("currentPrice") or 0),
            category=row.get("category") or "Liquid",
            asset_type=row.get("assetType"),
        )


class TradeMapper(_RecordMapper):
    """Maps Trade <-> trades row."""

    columns = {
        "id": "id",
        "date": "date",
        "ticker": "ticker",
        "direction": "direction",
        "entry_price": "entryPrice",
        "exit_price": "exitPrice",
        "size": "size",
        "status": "status",
        "rationale": "rationale",
        "exit_reason": "exitReason",
        "post_exit_reflection": "postExitReflection",
        "pnl": "pnl",
    }

    @staticmethod
    def db_to_model(row: dict[str, Any]) -> Trade:
        return Trade(
            id=str(row["id"]),
            date=parse_date(row["date"]),
            ticker=row["ticker"],
            direction=row["direction"],
            entry_price=float(row["entryPrice"]),
            exit_price=_optional_float(row.get("exitPrice")),
            size=float(row.get("size") or 0),
            status=row.get("status") or "Open",
            rationale=row.get("rationale") or "",
            exit_reason=row.get("exitReason"),
            post_exit_reflection=row.get("postExitReflection"),
            pnl=_optional_float(row.get("pnl")),
        )
