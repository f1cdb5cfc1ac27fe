"""In-memory data store with write-through persistence."""

import logging
import threading
import uuid
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Optional

from tradedesk.core.exceptions import NotFoundError, StorageError, ValidationError
from tradedesk.domain.models import (
    JournalEntry,
    PortfolioItem,
    Trade,
    Sentiment,
    Direction,
    TradeStatus,
    PortfolioCategory,
    AssetType,
    infer_status,
)
from tradedesk.repositories.protocols import (
    JournalRepository,
    PortfolioRepository,
    TradeRepository,
)
from tradedesk.services.price_refresh_service import PriceRefreshService

logger = logging.getLogger(__name__)


@dataclass
class JournalEntryCreate:
    """Input data for creating a journal entry."""

    date: date
    macro_review: str
    alts_market: str
    summary: str
    sentiment: Sentiment


@dataclass
class PortfolioItemCreate:
    """Input data for creating a portfolio item."""

    token: str
    amount: float
    buy_price: float
    current_price: float
    category: PortfolioCategory = PortfolioCategory.LIQUID
    asset_type: AssetType = AssetType.CRYPTO


class _Unset:
    """Marker for a field left out of a partial update."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class PortfolioItemUpdate:
    """Partial update data for editing a portfolio item. UNSET fields are unchanged."""

    token: Optional[str] = UNSET
    amount: Optional[float] = UNSET
    buy_price: Optional[float] = UNSET
    current_price: Optional[float] = UNSET
    category: Optional[PortfolioCategory] = UNSET
    asset_type: Optional[AssetType] = UNSET


@dataclass
class TradeCreate:
    """Input data for logging a trade. ``status=None`` means infer it."""

    date: date
    ticker: str
    direction: Direction
    entry_price: float
    size: float
    exit_price: Optional[float] = None
    status: Optional[TradeStatus] = None
    rationale: str = ""
    exit_reason: Optional[str] = None
    post_exit_reflection: Optional[str] = None


@dataclass
class TradeUpdate:
    """
    Partial update data for editing a trade. pnl is never accepted.

    Fields left UNSET are unchanged. ``None`` clears the nullable fields
    (exit_price, exit_reason, post_exit_reflection).
    """

    date: Optional[date] = UNSET
    ticker: Optional[str] = UNSET
    direction: Optional[Direction] = UNSET
    entry_price: Optional[float] = UNSET
    size: Optional[float] = UNSET
    exit_price: Optional[float] = UNSET
    status: Optional[TradeStatus] = UNSET
    rationale: Optional[str] = UNSET
    exit_reason: Optional[str] = UNSET
    post_exit_reflection: Optional[str] = UNSET


TRADE_NULLABLE_FIELDS = ("exit_price", "exit_reason", "post_exit_reflection")


def _supplied(patch: Any, nullable: tuple[str, ...] = ()) -> dict[str, Any]:
    """Fields the caller set. Only ``nullable`` fields may be set to None."""
    changes = {k: v for k, v in vars(patch).items() if v is not UNSET}
    for name, value in changes.items():
        if value is None and name not in nullable:
            raise ValidationError(f"{name} cannot be null")
    return changes


def _validate_entry_price(entry_price: float) -> None:
    # PnL divides by the entry price
    if entry_price is None or entry_price <= 0:
        raise ValidationError("entry_price must be greater than 0")


class DataStore:
    """
    Process-wide state for journal entries, portfolio items, and trades.

    Every mutation writes through the repository first; the cached
    collection changes only when that write succeeds. Storage failures are
    logged and reported as ``None``/``False`` with the cache untouched.
    """

    def __init__(
        self,
        journal_repo: JournalRepository,
        portfolio_repo: PortfolioRepository,
        trade_repo: TradeRepository,
        price_refresher: Optional[PriceRefreshService] = None,
    ):
        self._journal_repo = journal_repo
        self._portfolio_repo = portfolio_repo
        self._trade_repo = trade_repo
        self._price_refresher = price_refresher
        if price_refresher is not None:
            price_refresher.bind(self.list_portfolio_items)

        self._lock = threading.RLock()
        self._journal_entries: list[JournalEntry] = []
        self._portfolio_items: list[PortfolioItem] = []
        self._trades: list[Trade] = []
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading and reads
    # ------------------------------------------------------------------

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Load all three collections once; a failed read leaves that one empty."""
        with self._lock:
            self._journal_entries = self._load_collection("journal entries", self._journal_repo)
            self._portfolio_items = self._load_collection("portfolio items", self._portfolio_repo)
            self._trades = self._load_collection("trades", self._trade_repo)
            self._loaded = True
        logger.info(
            f"Loaded {len(self._journal_entries)} journal entries, "
            f"{len(self._portfolio_items)} portfolio items, {len(self._trades)} trades"
        )
        self._ensure_price_refresh()

    def list_journal_entries(self) -> list[JournalEntry]:
        with self._lock:
            return list(self._journal_entries)

    def list_portfolio_items(self) -> list[PortfolioItem]:
        with self._lock:
            return list(self._portfolio_items)

    def list_trades(self) -> list[Trade]:
        with self._lock:
            return list(self._trades)

    def get_trade(self, trade_id: str) -> Trade:
        with self._lock:
            return self._find(self._trades, "Trade", trade_id)

    def get_portfolio_item(self, item_id: str) -> PortfolioItem:
        with self._lock:
            return self._find(self._portfolio_items, "PortfolioItem", item_id)

    # ------------------------------------------------------------------
    # Journal
    # ------------------------------------------------------------------

    def add_journal_entry(self, data: JournalEntryCreate) -> Optional[JournalEntry]:
        entry = JournalEntry(id=self._new_id(), **vars(data))
        with self._lock:
            if not self._write("insert journal entry", self._journal_repo.insert, entry):
                return None
            self._journal_entries = [entry] + self._journal_entries
        return entry

    def delete_journal_entry(self, entry_id: str) -> bool:
        with self._lock:
            self._find(self._journal_entries, "JournalEntry", entry_id)
            if not self._write("delete journal entry", self._journal_repo.delete, entry_id):
                return False
            self._journal_entries = [e for e in self._journal_entries if e.id != entry_id]
        return True

    # ------------------------------------------------------------------
    # Portfolio
    # ------------------------------------------------------------------

    def add_portfolio_item(self, data: PortfolioItemCreate) -> Optional[PortfolioItem]:
        item = PortfolioItem(id=self._new_id(), **vars(data))
        with self._lock:
            if not self._write("insert portfolio item", self._portfolio_repo.insert, item):
                return None
            self._portfolio_items = [item] + self._portfolio_items
        self._after_portfolio_write()
        return item

    def edit_portfolio_item(
        self,
        item_id: str,
        patch: PortfolioItemUpdate,
    ) -> Optional[PortfolioItem]:
        changes = _supplied(patch)
        if "token" in changes:
            changes["token"] = changes["token"].upper()
        with self._lock:
            current = self._find(self._portfolio_items, "PortfolioItem", item_id)
            updated = replace(current, **changes)
            if not self._write("update portfolio item", self._portfolio_repo.update, item_id, changes):
                return None
            self._portfolio_items = [
                updated if i.id == item_id else i for i in self._portfolio_items
            ]
        self._after_portfolio_write()
        return updated

    def delete_portfolio_item(self, item_id: str) -> bool:
        with self._lock:
            self._find(self._portfolio_items, "PortfolioItem", item_id)
            if not self._write("delete portfolio item", self._portfolio_repo.delete, item_id):
                return False
            self._portfolio_items = [i for i in self._portfolio_items if i.id != item_id]
        return True

    # ------------------------------------------------------------------
    # Trades
    # ------------------------------------------------------------------

    def add_trade(self, data: TradeCreate) -> Optional[Trade]:
        """
        Log a trade, deriving status (if not given) and pnl.

        Raises ValidationError for a non-positive entry price.
        """
        _validate_entry_price(data.entry_price)
        fields = vars(data).copy()
        if fields["status"] is None:
            fields["status"] = TradeStatus.OPEN
            if data.exit_price is not None:
                fields["status"] = infer_status(data.direction, data.entry_price, data.exit_price)
        trade = Trade(id=self._new_id(), **fields)
        trade.recompute_pnl()

        with self._lock:
            if not self._write("insert trade", self._trade_repo.insert, trade):
                return None
            self._trades = [trade] + self._trades
        return trade

    def edit_trade(self, trade_id: str, patch: TradeUpdate) -> Optional[Trade]:
        """
        Merge a partial update into a trade and re-derive pnl.

        Supplying an exit price without a status infers the status from the
        resulting direction and entry price; clearing the exit price without a
        status reopens the trade. An explicit status always wins.
        """
        changes = _supplied(patch, nullable=TRADE_NULLABLE_FIELDS)
        if "ticker" in changes:
            changes["ticker"] = changes["ticker"].upper()
        with self._lock:
            current = self._find(self._trades, "Trade", trade_id)
            updated = replace(current, **changes)
            _validate_entry_price(updated.entry_price)
            if "exit_price" in changes and "status" not in changes:
                if updated.exit_price is None:
                    updated.status = TradeStatus.OPEN
                else:
                    updated.status = infer_status(
                        updated.direction, updated.entry_price, updated.exit_price
                    )
                changes["status"] = updated.status
            changes["pnl"] = updated.recompute_pnl()

            if not self._write("update trade", self._trade_repo.update, trade_id, changes):
                return None
            self._trades = [updated if t.id == trade_id else t for t in self._trades]
        return updated

    def delete_trade(self, trade_id: str) -> bool:
        with self._lock:
            self._find(self._trades, "Trade", trade_id)
            if not self._write("delete trade", self._trade_repo.delete, trade_id):
                return False
            self._trades = [t for t in self._trades if t.id != trade_id]
        return True

    def clear_trades(self) -> bool:
        """Delete every trade in one storage call; journal and portfolio are untouched."""
        with self._lock:
            if not self._write("clear trades", self._trade_repo.delete_all):
                return False
            self._trades = []
        logger.info("Cleared trade history")
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def _find(records: list, resource: str, record_id: str):
        for record in records:
            if record.id == record_id:
                return record
        raise NotFoundError(resource, record_id)

    @staticmethod
    def _load_collection(label: str, repo: Any) -> list:
        try:
            return repo.list_all()
        except StorageError as e:
            logger.error(f"Error loading {label}: {e.message}")
            return []

    @staticmethod
    def _write(action: str, operation, *args) -> bool:
        try:
            operation(*args)
        except StorageError as e:
            logger.error(f"Failed to {action}: {e.message}")
            return False
        return True

    def _after_portfolio_write(self) -> None:
        self._ensure_price_refresh()
        if self._price_refresher is not None:
            self._price_refresher.schedule_refresh()

    def _ensure_price_refresh(self) -> None:
        """Start the repeating refresh once the portfolio is non-empty."""
        if self._price_refresher is None or self._price_refresher.is_started:
            return
        if self._loaded and self._portfolio_items:
            self._price_refresher.start()
