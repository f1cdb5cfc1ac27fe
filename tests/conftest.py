"""
Pytest configuration and fixtures for TradeDesk tests.

This module provides:
- In-memory SQLite fixtures for the local key-value store
- In-memory and failing repositories
- Deterministic and failing price feeds
- Service fixtures and record factories
- API test client bound to an isolated AppContext
"""

import uuid
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from tradedesk.main import app
from tradedesk.app_context import AppContext, set_app_context
from tradedesk.config.settings import Settings, reset_settings
from tradedesk.core.exceptions import PriceFeedError, StorageError
from tradedesk.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from tradedesk.repositories.sqlalchemy import orm_models  # noqa: F401
from tradedesk.repositories.sqlalchemy import (
    SqlAlchemyKeyValueStore,
    SqlAlchemyJournalRepository,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyTradeRepository,
)
from tradedesk.repositories import Repositories
from tradedesk.providers import SyntheticPriceWalk
from tradedesk.services import (
    AnalysisService,
    DataStore,
    PriceRefreshService,
    JournalEntryCreate,
    PortfolioItemCreate,
    TradeCreate,
)
from tradedesk.domain.models import (
    PortfolioItem,
    Trade,
    Sentiment,
    Direction,
    TradeStatus,
    PortfolioCategory,
    AssetType,
)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session_factory(test_engine) -> sessionmaker:
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def kv_store(session_factory) -> SqlAlchemyKeyValueStore:
    """Provide test key-value store."""
    return SqlAlchemyKeyValueStore(session_factory)


@pytest.fixture
def sqlalchemy_repositories(kv_store) -> Repositories:
    """Local key-value repositories over the test database."""
    return Repositories(
        backend="local",
        journal=SqlAlchemyJournalRepository(kv_store),
        portfolio=SqlAlchemyPortfolioRepository(kv_store),
        trades=SqlAlchemyTradeRepository(kv_store),
    )


# =============================================================================
# IN-MEMORY REPOSITORIES
# =============================================================================


class InMemoryRepository:
    """
    Collection repository backed by a plain list.

    Set ``fail = True`` to make every call raise StorageError.
    """

    def __init__(self, records: Optional[list] = None):
        self.records = list(records or [])
        self.fail = False
        self.calls: list[str] = []

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if self.fail:
            raise StorageError(f"{op} rejected")

    def list_all(self) -> list:
        self._check("list_all")
        return list(self.records)

    def insert(self, record: Any) -> None:
        self._check("insert")
        self.records.insert(0, replace(record))

    def update(self, record_id: str, fields: dict[str, Any]) -> None:
        self._check("update")
        for record in self.records:
            if record.id == record_id:
                for name, value in fields.items():
                    setattr(record, name, value)

    def delete(self, record_id: str) -> None:
        self._check("delete")
        self.records = [r for r in self.records if r.id != record_id]

    def delete_all(self) -> None:
        self._check("delete_all")
        self.records = []


@pytest.fixture
def journal_repo() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def portfolio_repo() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def trade_repo() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def memory_repositories(journal_repo, portfolio_repo, trade_repo) -> Repositories:
    return Repositories(
        backend="memory",
        journal=journal_repo,
        portfolio=portfolio_repo,
        trades=trade_repo,
    )


# =============================================================================
# PRICE FEED FIXTURES
# =============================================================================


class DeterministicPriceFeed:
    """
    Deterministic crypto price feed for testing.

    Returns fixed prices and records every requested ticker list.
    """

    FIXED_PRICES = {
        "BTC": 64000.0,
        "ETH": 3100.0,
        "SOL": 150.0,
    }

    def __init__(self, prices: Optional[dict[str, float]] = None):
        self._prices = dict(prices) if prices is not None else dict(self.FIXED_PRICES)
        self.requests: list[list[str]] = []

    def get_prices(self, tickers: list[str]) -> dict[str, float]:
        self.requests.append(list(tickers))
        return {
            t.upper(): self._prices[t.upper()]
            for t in tickers
            if t.upper() in self._prices
        }


class FailingPriceFeed:
    """Price feed that always fails."""

    def __init__(self):
        self.requests: list[list[str]] = []

    def get_prices(self, tickers: list[str]) -> dict[str, float]:
        self.requests.append(list(tickers))
        raise PriceFeedError("Network unavailable")


@pytest.fixture
def deterministic_feed() -> DeterministicPriceFeed:
    return DeterministicPriceFeed()


@pytest.fixture
def failing_feed() -> FailingPriceFeed:
    return FailingPriceFeed()


@pytest.fixture
def price_walk() -> SyntheticPriceWalk:
    """Synthetic walk with a fixed seed."""
    return SyntheticPriceWalk(seed=42)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def price_refresher(deterministic_feed, price_walk) -> PriceRefreshService:
    """Price refresher without a scheduler (refreshes run inline)."""
    return PriceRefreshService(price_feed=deterministic_feed, price_walk=price_walk)


@pytest.fixture
def data_store(journal_repo, portfolio_repo, trade_repo, price_refresher) -> DataStore:
    """Loaded DataStore over empty in-memory repositories."""
    store = DataStore(
        journal_repo=journal_repo,
        portfolio_repo=portfolio_repo,
        trade_repo=trade_repo,
        price_refresher=price_refresher,
    )
    store.load()
    return store


@pytest.fixture
def analysis_service(data_store, price_refresher) -> AnalysisService:
    return AnalysisService(data_store=data_store, price_refresher=price_refresher)


# =============================================================================
# FACTORY HELPERS
# =============================================================================


def make_portfolio_item(
    token: str = "BTC",
    amount: float = 1.0,
    buy_price: float = 100.0,
    current_price: float = 100.0,
    category: PortfolioCategory = PortfolioCategory.LIQUID,
    asset_type: AssetType = AssetType.CRYPTO,
    item_id: Optional[str] = None,
) -> PortfolioItem:
    return PortfolioItem(
        id=item_id or str(uuid.uuid4()),
        token=token,
        amount=amount,
        buy_price=buy_price,
        current_price=current_price,
        category=category,
        asset_type=asset_type,
    )


def make_trade(
    ticker: str = "ETH",
    direction: Direction = Direction.LONG,
    entry_price: float = 100.0,
    size: float = 1000.0,
    exit_price: Optional[float] = None,
    status: TradeStatus = TradeStatus.OPEN,
    trade_date: date = date(2024, 6, 1),
    trade_id: Optional[str] = None,
) -> Trade:
    trade = Trade(
        id=trade_id or str(uuid.uuid4()),
        date=trade_date,
        ticker=ticker,
        direction=direction,
        entry_price=entry_price,
        size=size,
        exit_price=exit_price,
        status=status,
    )
    trade.recompute_pnl()
    return trade


def journal_create_data(summary: str = "Range day") -> JournalEntryCreate:
    return JournalEntryCreate(
        date=date(2024, 6, 3),
        macro_review="Quiet macro calendar.",
        alts_market="Alts flat.",
        summary=summary,
        sentiment=Sentiment.NEUTRAL,
    )


def portfolio_create_data(
    token: str = "BTC",
    asset_type: AssetType = AssetType.CRYPTO,
) -> PortfolioItemCreate:
    return PortfolioItemCreate(
        token=token,
        amount=2.0,
        buy_price=100.0,
        current_price=120.0,
        asset_type=asset_type,
    )


def trade_create_data(
    direction: Direction = Direction.LONG,
    entry_price: float = 100.0,
    exit_price: Optional[float] = None,
    status: Optional[TradeStatus] = None,
    size: float = 1000.0,
) -> TradeCreate:
    return TradeCreate(
        date=date(2024, 6, 3),
        ticker="eth",
        direction=direction,
        entry_price=entry_price,
        size=size,
        exit_price=exit_price,
        status=status,
        rationale="Breakout retest",
    )


@pytest.fixture
def item_factory() -> Callable[..., PortfolioItem]:
    return make_portfolio_item


@pytest.fixture
def trade_factory() -> Callable[..., Trade]:
    return make_trade


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def api_context(memory_repositories, deterministic_feed) -> AppContext:
    """AppContext over in-memory repositories with no background scheduler."""
    return AppContext(
        settings=Settings(enable_price_scheduler=False),
        repositories=memory_repositories,
        price_feed=deterministic_feed,
        price_walk=SyntheticPriceWalk(seed=7),
    )


@pytest.fixture
def client(api_context) -> TestClient:
    """Provide FastAPI test client bound to the test context."""
    set_app_context(api_context)
    with TestClient(app) as c:
        yield c
    set_app_context(None)
