"""Built-in sample records used when local storage is empty."""

from datetime import date

from tradedesk.domain.models import (
    JournalEntry,
    PortfolioItem,
    Trade,
    Sentiment,
    Direction,
    TradeStatus,
    PortfolioCategory,
    AssetType,
)


def default_journal_entries() -> list[JournalEntry]:
    return [
        JournalEntry(
            id="4f1c7a52-9a3e-4c1b-8e0d-1b2f3c4d5e01",
            date=date(2024, 5, 20),
            macro_review="CPI came in cooler than expected; yields eased and the dollar softened.",
            alts_market="ETH/BTC bounced off support; AI and L2 names led the rotation.",
            summary="Risk-on tone. Keep adding on dips, respect the weekly high.",
            sentiment=Sentiment.BULLISH,
        ),
        JournalEntry(
            id="4f1c7a52-9a3e-4c1b-8e0d-1b2f3c4d5e02",
            date=date(2024, 5, 17),
            macro_review="FOMC minutes hawkish; rate cut odds pushed further out.",
            alts_market="Alts bled against BTC, funding reset to neutral.",
            summary="Chop. No new positions until range resolves.",
            sentiment=Sentiment.MIXED,
        ),
    ]


def default_portfolio_items() -> list[PortfolioItem]:
    return [
        PortfolioItem(
            id="7a9e2b10-3c4d-4e5f-9a8b-0c1d2e3f4a01",
            token="BTC",
            amount=0.5,
            buy_price=42000.0,
            current_price=65000.0,
            category=PortfolioCategory.LIQUID,
            asset_type=AssetType.CRYPTO,
        ),
        PortfolioItem(
            id="7a9e2b10-3c4d-4e5f-9a8b-0c1d2e3f4a02",
            token="ETH",
            amount=4.0,
            buy_price=2200.0,
            current_price=3100.0,
            category=PortfolioCategory.FARMING,
            asset_type=AssetType.CRYPTO,
        ),
        PortfolioItem(
            id="7a9e2b10-3c4d-4e5f-9a8b-0c1d2e3f4a03",
            token="AAPL",
            amount=20.0,
            buy_price=170.0,
            current_price=190.0,
            category=PortfolioCategory.VESTED,
            asset_type=AssetType.STOCK,
        ),
    ]


def default_trades() -> list[Trade]:
    closed = Trade(
        id="c3d4e5f6-a7b8-4c9d-8e0f-1a2b3c4d5e01",
        date=date(2024, 5, 15),
        ticker="SOL",
        direction=Direction.LONG,
        entry_price=140.0,
        exit_price=161.0,
        size=5000.0,
        status=TradeStatus.WIN,
        rationale="Reclaimed range high with volume.",
        exit_reason="Hit first target.",
        post_exit_reflection="Could have trailed the remainder.",
    )
    closed.recompute_pnl()
    return [
        Trade(
            id="c3d4e5f6-a7b8-4c9d-8e0f-1a2b3c4d5e02",
            date=date(2024, 5, 19),
            ticker="ETH",
            direction=Direction.SHORT,
            entry_price=3150.0,
            size=2500.0,
            status=TradeStatus.OPEN,
            rationale="Rejected at weekly resistance.",
        ),
        closed,
    ]
