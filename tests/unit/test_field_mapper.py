"""
Unit tests for the domain <-> stored record field mappers.
"""

from datetime import date

import pytest

from tradedesk.domain.models import AssetType, Direction, PortfolioCategory, Sentiment, TradeStatus
from tradedesk.repositories.field_mapper import (
    JournalEntryMapper,
    PortfolioItemMapper,
    TradeMapper,
)

from tests.conftest import make_portfolio_item, make_trade


class TestModelToDb:
    """Tests for writing records with camelCase columns."""

    def test_trade_columns(self):
        trade = make_trade(exit_price=110.0, status=TradeStatus.WIN, trade_id="t1")

        row = TradeMapper.model_to_db(trade)

        assert row["id"] == "t1"
        assert row["date"] == "2024-06-01"
        assert row["direction"] == "Long"
        assert row["status"] == "Win"
        assert row["entryPrice"] == 100.0
        assert row["exitPrice"] == 110.0
        assert row["pnl"] == pytest.approx(100.0)
        assert "entry_price" not in row

    def test_portfolio_columns(self):
        row = PortfolioItemMapper.model_to_db(make_portfolio_item(item_id="p1"))

        assert set(row) == {"id", "token", "amount", "buyPrice", "currentPrice", "category", "assetType"}
        assert row["assetType"] == "Crypto"

    def test_fields_to_db_partial(self):
        row = TradeMapper.fields_to_db({"exit_price": 90.0, "status": TradeStatus.LOSS, "pnl": None})

        assert row == {"exitPrice": 90.0, "status": "Loss", "pnl": None}

    def test_fields_to_db_unknown_field(self):
        with pytest.raises(KeyError):
            PortfolioItemMapper.fields_to_db({"nope": 1})


class TestDbToModel:
    """Tests for reading stored records."""

    def test_journal_entry(self):
        entry = JournalEntryMapper.db_to_model({
            "id": "j1",
            "date": "2024-05-20",
            "macroReview": "CPI cool",
            "altsMarket": "Alts up",
            "summary": "Risk on",
            "sentiment": "Bullish",
        })

        assert entry.date == date(2024, 5, 20)
        assert entry.macro_review == "CPI cool"
        assert entry.sentiment == Sentiment.BULLISH

    def test_portfolio_item_without_asset_type_is_crypto(self):
        """
        GIVEN a stored holding written before asset types existed
        WHEN it is read
        THEN it is treated as crypto
        """
        item = PortfolioItemMapper.db_to_model({
            "id": "p1",
            "token": "btc",
            "amount": "0.5",
            "buyPrice": 42000,
            "currentPrice": 65000,
            "category": "Farming",
        })

        assert item.asset_type == AssetType.CRYPTO
        assert item.category == PortfolioCategory.FARMING
        assert item.token == "BTC"
        assert item.amount == 0.5

    def test_open_trade_nulls(self):
        trade = TradeMapper.db_to_model({
            "id": "t1",
            "date": "2024-06-01T00:00:00",
            "ticker": "eth",
            "direction": "Short",
            "entryPrice": 3150,
            "exitPrice": None,
            "size": 2500,
            "status": "Open",
            "rationale": None,
            "exitReason": None,
            "postExitReflection": None,
            "pnl": None,
        })

        assert trade.direction == Direction.SHORT
        assert trade.date == date(2024, 6, 1)
        assert trade.exit_price is None
        assert trade.pnl is None
        assert trade.rationale == ""
