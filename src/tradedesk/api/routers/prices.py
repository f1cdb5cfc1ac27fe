"""Live price endpoints."""

from fastapi import APIRouter, Depends

from tradedesk.api.deps import get_price_refresher
from tradedesk.api.schemas import PriceSnapshotResponse
from tradedesk.services import PriceRefreshService

router = APIRouter(prefix="/prices", tags=["prices"])


@router.get("", response_model=PriceSnapshotResponse)
def get_prices(
    prices: PriceRefreshService = Depends(get_price_refresher),
) -> PriceSnapshotResponse:
    """Current live-price map and when it was last refreshed."""
    return PriceSnapshotResponse.model_validate(prices.snapshot())


@router.post("/refresh", response_model=PriceSnapshotResponse)
def refresh_prices(
    prices: PriceRefreshService = Depends(get_price_refresher),
) -> PriceSnapshotResponse:
    """Run a refresh now. Skipped if one is already in flight."""
    prices.refresh()
    return PriceSnapshotResponse.model_validate(prices.snapshot())
