"""Dependency injection for FastAPI."""

from fastapi import Depends

from tradedesk.app_context import AppContext, get_app_context
from tradedesk.services import AnalysisService, DataStore, PriceRefreshService


def get_context() -> AppContext:
    """Provide the process-wide AppContext."""
    return get_app_context()


def get_data_store(context: AppContext = Depends(get_context)) -> DataStore:
    """Provide the DataStore instance."""
    return context.store


def get_price_refresher(context: AppContext = Depends(get_context)) -> PriceRefreshService:
    """Provide the PriceRefreshService instance."""
    return context.prices


def get_analysis_service(context: AppContext = Depends(get_context)) -> AnalysisService:
    """Provide the AnalysisService instance."""
    return context.analysis
