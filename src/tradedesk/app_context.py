"""Application context: the composition root.

Builds settings, storage, price providers, and services once, and hands
them to consumers explicitly.
"""

import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from tradedesk.config.settings import Settings, get_settings
from tradedesk.providers import CryptoComparePriceFeed, SyntheticPriceWalk
from tradedesk.providers.price_feed import PriceFeed
from tradedesk.repositories import Repositories, create_repositories
from tradedesk.services import AnalysisService, DataStore, PriceRefreshService
from tradedesk.services.price_refresh_service import create_scheduler

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context owning the data store and price refresher.

    The storage strategy is chosen once, here, for the process lifetime.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        repositories: Optional[Repositories] = None,
        price_feed: Optional[PriceFeed] = None,
        price_walk: Optional[SyntheticPriceWalk] = None,
        session_factory: Optional[sessionmaker] = None,
    ):
        self._settings = settings or get_settings()
        self._repositories = repositories or create_repositories(
            self._settings, session_factory=session_factory
        )

        feed = price_feed or CryptoComparePriceFeed(
            url=self._settings.price_feed_url,
            timeout_seconds=self._settings.price_feed_timeout_seconds,
        )
        self._scheduler = create_scheduler() if self._settings.enable_price_scheduler else None
        self._price_refresher = PriceRefreshService(
            price_feed=feed,
            price_walk=price_walk,
            scheduler=self._scheduler,
            interval_seconds=self._settings.price_refresh_interval_seconds,
            delay_seconds=self._settings.price_refresh_delay_seconds,
        )
        self._store = DataStore(
            journal_repo=self._repositories.journal,
            portfolio_repo=self._repositories.portfolio,
            trade_repo=self._repositories.trades,
            price_refresher=self._price_refresher,
        )
        self._analysis = AnalysisService(
            data_store=self._store,
            price_refresher=self._price_refresher,
        )
        self._initialized = False

    def initialize(self) -> None:
        """Load all collections (once)."""
        if self._initialized:
            return
        self._store.load()
        self._initialized = True
        logger.info(f"Application context ready ({self._repositories.backend} storage)")

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def backend(self) -> str:
        return self._repositories.backend

    @property
    def store(self) -> DataStore:
        return self._store

    @property
    def prices(self) -> PriceRefreshService:
        return self._price_refresher

    @property
    def analysis(self) -> AnalysisService:
        return self._analysis

    def close(self) -> None:
        """Stop scheduled price refreshes and release the local database."""
        self._price_refresher.stop()
        if self._scheduler is not None and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        if self._repositories.backend == "local":
            from tradedesk.repositories.sqlalchemy import reset_database

            reset_database()


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context
