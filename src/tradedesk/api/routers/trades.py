"""Trade log endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from tradedesk.api.deps import get_analysis_service, get_data_store
from tradedesk.api.schemas import (
    TradeCreateRequest,
    TradeUpdateRequest,
    TradeResponse,
    TradeListResponse,
    TradeStatsResponse,
)
from tradedesk.core.exceptions import StorageError, ValidationError
from tradedesk.services import AnalysisService, DataStore, TradeCreate, TradeUpdate

router = APIRouter(prefix="/trades", tags=["trades"])


@router.get("", response_model=TradeListResponse)
def list_trades(
    store: DataStore = Depends(get_data_store),
) -> TradeListResponse:
    """List trades, newest first."""
    trades = store.list_trades()
    return TradeListResponse(
        trades=[TradeResponse.model_validate(t) for t in trades],
        count=len(trades),
    )


@router.get("/stats", response_model=TradeStatsResponse)
def get_trade_stats(
    analysis: AnalysisService = Depends(get_analysis_service),
) -> TradeStatsResponse:
    """Realized PnL, win rate, and the cumulative PnL series."""
    return TradeStatsResponse.model_validate(analysis.trade_stats())


@router.get("/{trade_id}", response_model=TradeResponse)
def get_trade(
    trade_id: str,
    store: DataStore = Depends(get_data_store),
) -> TradeResponse:
    """Get a single trade."""
    return TradeResponse.model_validate(store.get_trade(trade_id))


@router.post("", response_model=TradeResponse, status_code=201)
def create_trade(
    request: TradeCreateRequest,
    store: DataStore = Depends(get_data_store),
) -> TradeResponse:
    """Log a trade. Status is inferred from the exit price when omitted."""
    trade = store.add_trade(TradeCreate(**request.model_dump()))
    if trade is None:
        raise StorageError("Trade could not be saved")
    return TradeResponse.model_validate(trade)


@router.patch("/{trade_id}", response_model=TradeResponse)
def update_trade(
    trade_id: str,
    request: TradeUpdateRequest,
    store: DataStore = Depends(get_data_store),
) -> TradeResponse:
    """
    Edit a trade. Omitted fields are left unchanged; null clears the exit
    price, exit reason, and reflection. pnl is recomputed from the result.
    """
    patch = TradeUpdate(**request.model_dump(exclude_unset=True))
    trade = store.edit_trade(trade_id, patch)
    if trade is None:
        raise StorageError("Trade could not be updated")
    return TradeResponse.model_validate(trade)


@router.delete("", status_code=204)
def clear_trades(
    confirm: bool = Query(False, description="Must be true to wipe the trade log"),
    store: DataStore = Depends(get_data_store),
) -> Response:
    """Delete every trade. Journal and portfolio are untouched."""
    if not confirm:
        raise ValidationError("Clearing the trade log requires confirm=true")
    if not store.clear_trades():
        raise StorageError("Trade log could not be cleared")
    return Response(status_code=204)


@router.delete("/{trade_id}", status_code=204)
def delete_trade(
    trade_id: str,
    confirm: bool = Query(False, description="Must be true to delete"),
    store: DataStore = Depends(get_data_store),
) -> Response:
    """Delete a single trade."""
    if not confirm:
        raise ValidationError("Deleting a trade requires confirm=true")
    if not store.delete_trade(trade_id):
        raise StorageError("Trade could not be deleted")
    return Response(status_code=204)
