"""Live-price map maintenance: fetch, synthesize, merge, and scheduling."""

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, Mapping, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler

from tradedesk.core.exceptions import PriceFeedError
from tradedesk.core.timezone import EASTERN_TZ, now_eastern
from tradedesk.domain.models import PortfolioItem
from tradedesk.domain.views import PriceSnapshot
from tradedesk.providers.price_feed import PriceFeed
from tradedesk.providers.synthetic_provider import SyntheticPriceWalk

logger = logging.getLogger(__name__)

INTERVAL_JOB_ID = "price_refresh_interval"
DELAYED_JOB_ID = "price_refresh_delayed"


def partition_items(items: list[PortfolioItem]) -> tuple[set[str], list[PortfolioItem]]:
    """Split holdings into a deduplicated crypto ticker set and everything else."""
    crypto: set[str] = set()
    others: list[PortfolioItem] = []
    for item in items:
        if item.is_crypto:
            crypto.add(item.token.upper())
        else:
            others.append(item)
    return crypto, others


def merge_prices(existing: Mapping[str, float], *updates: Mapping[str, float]) -> dict[str, float]:
    """
    Additive merge: new keys added, existing keys overwritten, others kept.

    Updates with disjoint keys give the same result in any order.
    """
    merged = dict(existing)
    for update in updates:
        merged.update(update)
    return merged


def create_scheduler() -> BackgroundScheduler:
    """Background scheduler for refresh jobs (one run at a time per job)."""
    return BackgroundScheduler(
        timezone=EASTERN_TZ,
        job_defaults={
            "coalesce": True,
            "max_instances": 1,
            "misfire_grace_time": 30,
        },
    )


class PriceRefreshService:
    """
    Keeps the live-price map for portfolio valuation.

    Crypto holdings are priced from the batched feed; other holdings take a
    synthetic step from their last known price. Only one refresh runs at a
    time; triggers that arrive during a refresh are dropped.
    """

    def __init__(
        self,
        price_feed: PriceFeed,
        price_walk: Optional[SyntheticPriceWalk] = None,
        scheduler: Optional[BackgroundScheduler] = None,
        interval_seconds: float = 15.0,
        delay_seconds: float = 0.5,
    ):
        self._price_feed = price_feed
        self._price_walk = price_walk or SyntheticPriceWalk()
        self._scheduler = scheduler
        self._interval = interval_seconds
        self._delay = delay_seconds

        self._items_source: Optional[Callable[[], list[PortfolioItem]]] = None
        self._live_prices: dict[str, float] = {}
        self._last_updated: Optional[datetime] = None
        self._refresh_lock = threading.Lock()
        self._started = False

    def bind(self, items_source: Callable[[], list[PortfolioItem]]) -> None:
        """Set the callable that scheduled runs read holdings from."""
        self._items_source = items_source

    @property
    def live_prices(self) -> dict[str, float]:
        return dict(self._live_prices)

    @property
    def last_updated(self) -> Optional[datetime]:
        return self._last_updated

    @property
    def is_refreshing(self) -> bool:
        return self._refresh_lock.locked()

    @property
    def is_started(self) -> bool:
        return self._started

    def snapshot(self) -> PriceSnapshot:
        return PriceSnapshot(
            live_prices=self.live_prices,
            last_updated=self._last_updated,
            is_refreshing=self.is_refreshing,
        )

    def refresh(self, items: Optional[list[PortfolioItem]] = None) -> bool:
        """
        Run one refresh cycle and merge the results into the live-price map.

        Uses the bound items source when ``items`` is not given. Returns False
        if there was nothing to price or another refresh was in flight.
        """
        if items is None:
            items = self._items_source() if self._items_source else []
        if not items:
            return False

        if not self._refresh_lock.acquire(blocking=False):
            logger.debug("Price refresh already in flight; skipping trigger")
            return False
        try:
            crypto_tickers, other_items = partition_items(items)

            fetched: dict[str, float] = {}
            if crypto_tickers:
                try:
                    fetched = self._price_feed.get_prices(sorted(crypto_tickers))
                except PriceFeedError as e:
                    logger.warning(f"Failed to fetch crypto prices: {e.message}")
                except Exception as e:
                    logger.warning(f"Unexpected error fetching crypto prices: {e}")

            known = merge_prices(self._live_prices, fetched)
            synthetic: dict[str, float] = {}
            for item in other_items:
                token = item.token.upper()
                previous = synthetic.get(token, known.get(token))
                if previous is None:
                    previous = item.current_price
                synthetic[token] = self._price_walk.next_price(previous)

            self._live_prices = merge_prices(self._live_prices, fetched, synthetic)
            self._last_updated = now_eastern()
            logger.debug(
                f"Merged {len(fetched)} feed and {len(synthetic)} synthetic prices"
            )
            return True
        finally:
            self._refresh_lock.release()

    def start(self) -> None:
        """
        Refresh now, then every interval, on the background scheduler.

        Idempotent; a no-op without a scheduler.
        """
        if self._started or self._scheduler is None:
            return
        self._scheduler.add_job(
            self._run_scheduled,
            "interval",
            seconds=self._interval,
            id=INTERVAL_JOB_ID,
            replace_existing=True,
            next_run_time=now_eastern(),
        )
        if not self._scheduler.running:
            self._scheduler.start()
        self._started = True
        logger.info(f"Price refresh scheduled every {self._interval}s")

    def schedule_refresh(self) -> None:
        """
        Refresh once after the configured delay.

        Re-scheduling before the job fires replaces it, so a burst of edits
        results in a single run.
        """
        if self._scheduler is None:
            return
        self._scheduler.add_job(
            self._run_scheduled,
            "date",
            run_date=now_eastern() + timedelta(seconds=self._delay),
            id=DELAYED_JOB_ID,
            replace_existing=True,
        )
        if not self._scheduler.running:
            self._scheduler.start()

    def stop(self) -> None:
        """
        Cancel the repeating refresh only.

        A pending delayed refresh and a request already in flight are left to
        finish. Shutting the scheduler down is up to its owner.
        """
        if self._scheduler is None or not self._started:
            return
        try:
            self._scheduler.remove_job(INTERVAL_JOB_ID)
        except JobLookupError:
            logger.debug("Interval refresh job already removed")
        self._started = False
        logger.info("Price refresh interval cancelled")

    def _run_scheduled(self) -> None:
        self.refresh()
