"""
Unit tests for the AppContext composition root.
"""

from unittest.mock import MagicMock, patch

from tradedesk.app_context import AppContext
from tradedesk.config.settings import Settings
from tradedesk.domain import seed
from tradedesk.services.price_refresh_service import INTERVAL_JOB_ID

from tests.conftest import DeterministicPriceFeed, make_portfolio_item


class TestAppContext:
    """Tests for wiring and initialization."""

    def test_initialize_loads_once(self, memory_repositories, portfolio_repo):
        """
        GIVEN a context over in-memory repositories
        WHEN initialize is called twice
        THEN collections are read only once
        """
        portfolio_repo.records = [make_portfolio_item(token="BTC")]
        context = AppContext(
            settings=Settings(enable_price_scheduler=False),
            repositories=memory_repositories,
            price_feed=DeterministicPriceFeed(),
        )

        context.initialize()
        context.initialize()

        assert context.is_initialized
        assert portfolio_repo.calls.count("list_all") == 1
        assert context.store.list_portfolio_items()[0].token == "BTC"
        assert context.backend == "memory"

    def test_local_backend_seeds_sample_data(self, session_factory):
        context = AppContext(
            settings=Settings(
                supabase_url=None,
                supabase_anon_key=None,
                enable_price_scheduler=False,
            ),
            session_factory=session_factory,
            price_feed=DeterministicPriceFeed(),
        )

        context.initialize()

        assert context.backend == "local"
        assert len(context.store.list_trades()) == len(seed.default_trades())
        with patch("tradedesk.repositories.sqlalchemy.reset_database") as reset:
            context.close()
        reset.assert_called_once()

    def test_scheduler_only_created_when_enabled(self, memory_repositories):
        with patch("tradedesk.app_context.create_scheduler") as create_scheduler:
            AppContext(
                settings=Settings(enable_price_scheduler=False),
                repositories=memory_repositories,
                price_feed=DeterministicPriceFeed(),
            )
            create_scheduler.assert_not_called()

            AppContext(
                settings=Settings(enable_price_scheduler=True),
                repositories=memory_repositories,
                price_feed=DeterministicPriceFeed(),
            )
            create_scheduler.assert_called_once()

    def test_close_shuts_down_owned_scheduler(self, memory_repositories):
        """
        GIVEN a context that created a running scheduler
        WHEN the context is closed
        THEN the interval job is cancelled and the scheduler is shut down
        """
        with patch("tradedesk.app_context.create_scheduler") as create_scheduler:
            scheduler = MagicMock()
            scheduler.running = True
            create_scheduler.return_value = scheduler
            context = AppContext(
                settings=Settings(enable_price_scheduler=True),
                repositories=memory_repositories,
                price_feed=DeterministicPriceFeed(),
            )
        context.prices.start()

        context.close()

        scheduler.remove_job.assert_called_once_with(INTERVAL_JOB_ID)
        scheduler.shutdown.assert_called_once_with(wait=False)
        assert not context.prices.is_started
