"""
Integration tests for the local key-value repositories (SQLite).

Tests cover:
- Key-value get/set
- Built-in sample data when a key was never written
- Whole-collection write-through in camelCase JSON
- Corrupt records surfaced as StorageError
"""

import json

import pytest

from tradedesk.core.exceptions import StorageError
from tradedesk.domain import seed
from tradedesk.domain.models import TradeStatus
from tradedesk.repositories import create_repositories
from tradedesk.repositories.sqlalchemy import JOURNAL_KEY, PORTFOLIO_KEY, TRADES_KEY
from tradedesk.config.settings import Settings
from tradedesk.services import DataStore, TradeUpdate

from tests.conftest import journal_create_data, make_portfolio_item, make_trade, trade_create_data


class TestKeyValueStore:
    """Tests for SqlAlchemyKeyValueStore."""

    def test_missing_key_returns_none(self, kv_store):
        assert kv_store.get("absent") is None

    def test_set_then_overwrite(self, kv_store):
        kv_store.set("k", "one")
        kv_store.set("k", "two")

        assert kv_store.get("k") == "two"


class TestCollectionRepositories:
    """Tests for the collection-per-key repositories."""

    def test_never_written_returns_sample_data(self, sqlalchemy_repositories, kv_store):
        """
        GIVEN an empty database
        WHEN collections are listed
        THEN built-in sample data is returned and nothing is written
        """
        journal = sqlalchemy_repositories.journal.list_all()
        portfolio = sqlalchemy_repositories.portfolio.list_all()
        trades = sqlalchemy_repositories.trades.list_all()

        assert [e.id for e in journal] == [e.id for e in seed.default_journal_entries()]
        assert {i.token for i in portfolio} == {"BTC", "ETH", "AAPL"}
        assert len(trades) == 2
        assert kv_store.get(JOURNAL_KEY) is None

    def test_insert_writes_whole_collection_newest_first(self, sqlalchemy_repositories, kv_store):
        repo = sqlalchemy_repositories.portfolio
        kv_store.set(PORTFOLIO_KEY, "[]")
        first = make_portfolio_item(token="BTC", item_id="p1")
        second = make_portfolio_item(token="ETH", item_id="p2")

        repo.insert(first)
        repo.insert(second)

        rows = json.loads(kv_store.get(PORTFOLIO_KEY))
        assert [r["id"] for r in rows] == ["p2", "p1"]
        assert rows[0]["buyPrice"] == 100.0
        assert rows[0]["assetType"] == "Crypto"

    def test_first_mutation_persists_sample_data(self, sqlalchemy_repositories, kv_store):
        repo = sqlalchemy_repositories.trades

        repo.insert(make_trade(trade_id="new"))

        rows = json.loads(kv_store.get(TRADES_KEY))
        assert rows[0]["id"] == "new"
        assert len(rows) == 1 + len(seed.default_trades())

    def test_update_and_delete(self, sqlalchemy_repositories, kv_store):
        repo = sqlalchemy_repositories.trades
        kv_store.set(TRADES_KEY, "[]")
        repo.insert(make_trade(trade_id="t1"))
        repo.insert(make_trade(trade_id="t2"))

        repo.update("t1", {"exit_price": 110.0, "status": TradeStatus.WIN, "pnl": 100.0})
        repo.delete("t2")

        trades = repo.list_all()
        assert [t.id for t in trades] == ["t1"]
        assert trades[0].status == TradeStatus.WIN
        assert trades[0].pnl == 100.0

    def test_delete_all_leaves_other_keys(self, sqlalchemy_repositories, kv_store):
        sqlalchemy_repositories.journal.insert(seed.default_journal_entries()[0])

        sqlalchemy_repositories.trades.delete_all()

        assert json.loads(kv_store.get(TRADES_KEY)) == []
        assert len(json.loads(kv_store.get(JOURNAL_KEY))) >= 1

    def test_corrupt_record_raises_storage_error(self, sqlalchemy_repositories, kv_store):
        kv_store.set(JOURNAL_KEY, "not json")

        with pytest.raises(StorageError):
            sqlalchemy_repositories.journal.list_all()


class TestDataStoreOverSqlite:
    """DataStore write-through against the local backend."""

    def test_changes_survive_a_reload(self, sqlalchemy_repositories):
        """
        GIVEN a store over the local backend
        WHEN a trade is added and closed
        THEN a fresh store over the same database sees the closed trade
        """
        store = DataStore(
            journal_repo=sqlalchemy_repositories.journal,
            portfolio_repo=sqlalchemy_repositories.portfolio,
            trade_repo=sqlalchemy_repositories.trades,
        )
        store.load()
        store.add_journal_entry(journal_create_data("persisted"))
        trade = store.add_trade(trade_create_data())
        store.edit_trade(trade.id, TradeUpdate(exit_price=90.0))

        reloaded = DataStore(
            journal_repo=sqlalchemy_repositories.journal,
            portfolio_repo=sqlalchemy_repositories.portfolio,
            trade_repo=sqlalchemy_repositories.trades,
        )
        reloaded.load()

        assert reloaded.list_journal_entries()[0].summary == "persisted"
        closed = reloaded.get_trade(trade.id)
        assert closed.status == TradeStatus.LOSS
        assert closed.pnl == pytest.approx(-100.0)


class TestCreateRepositories:
    """Tests for storage strategy selection."""

    def test_local_backend_without_remote_settings(self, session_factory):
        settings = Settings(supabase_url=None, supabase_anon_key=None)

        repositories = create_repositories(settings, session_factory=session_factory)

        assert repositories.backend == "local"

    def test_blank_remote_settings_use_local(self, session_factory):
        settings = Settings(supabase_url="  ", supabase_anon_key="key")

        repositories = create_repositories(settings, session_factory=session_factory)

        assert repositories.backend == "local"
