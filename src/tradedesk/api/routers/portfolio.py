"""Portfolio holdings endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from tradedesk.api.deps import get_analysis_service, get_data_store
from tradedesk.api.schemas import (
    PortfolioItemCreateRequest,
    PortfolioItemUpdateRequest,
    PortfolioItemResponse,
    PortfolioItemListResponse,
    PortfolioSummaryResponse,
)
from tradedesk.core.exceptions import StorageError, ValidationError
from tradedesk.services import (
    AnalysisService,
    DataStore,
    PortfolioItemCreate,
    PortfolioItemUpdate,
)

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioItemListResponse)
def list_portfolio_items(
    store: DataStore = Depends(get_data_store),
) -> PortfolioItemListResponse:
    """List holdings, newest first."""
    items = store.list_portfolio_items()
    return PortfolioItemListResponse(
        items=[PortfolioItemResponse.model_validate(i) for i in items],
        count=len(items),
    )


@router.get("/summary", response_model=PortfolioSummaryResponse)
def get_portfolio_summary(
    analysis: AnalysisService = Depends(get_analysis_service),
) -> PortfolioSummaryResponse:
    """Value holdings at live prices (falling back to manual prices)."""
    return PortfolioSummaryResponse.model_validate(analysis.portfolio_valuation())


@router.post("", response_model=PortfolioItemResponse, status_code=201)
def create_portfolio_item(
    request: PortfolioItemCreateRequest,
    store: DataStore = Depends(get_data_store),
) -> PortfolioItemResponse:
    """Add a holding and schedule a price refresh."""
    item = store.add_portfolio_item(PortfolioItemCreate(**request.model_dump()))
    if item is None:
        raise StorageError("Portfolio item could not be saved")
    return PortfolioItemResponse.model_validate(item)


@router.patch("/{item_id}", response_model=PortfolioItemResponse)
def update_portfolio_item(
    item_id: str,
    request: PortfolioItemUpdateRequest,
    store: DataStore = Depends(get_data_store),
) -> PortfolioItemResponse:
    """Edit a holding. Omitted fields are left unchanged."""
    patch = PortfolioItemUpdate(**request.model_dump(exclude_unset=True))
    item = store.edit_portfolio_item(item_id, patch)
    if item is None:
        raise StorageError("Portfolio item could not be updated")
    return PortfolioItemResponse.model_validate(item)


@router.delete("/{item_id}", status_code=204)
def delete_portfolio_item(
    item_id: str,
    confirm: bool = Query(False, description="Must be true to delete"),
    store: DataStore = Depends(get_data_store),
) -> Response:
    """Remove a holding."""
    if not confirm:
        raise ValidationError("Deleting a portfolio item requires confirm=true")
    if not store.delete_portfolio_item(item_id):
        raise StorageError("Portfolio item could not be deleted")
    return Response(status_code=204)
