"""Market journal endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from tradedesk.api.deps import get_data_store
from tradedesk.api.schemas import (
    JournalEntryCreateRequest,
    JournalEntryResponse,
    JournalEntryListResponse,
)
from tradedesk.core.exceptions import StorageError, ValidationError
from tradedesk.services import DataStore, JournalEntryCreate

router = APIRouter(prefix="/journal", tags=["journal"])


@router.get("", response_model=JournalEntryListResponse)
def list_journal_entries(
    store: DataStore = Depends(get_data_store),
) -> JournalEntryListResponse:
    """List journal entries, newest first."""
    entries = store.list_journal_entries()
    return JournalEntryListResponse(
        entries=[JournalEntryResponse.model_validate(e) for e in entries],
        count=len(entries),
    )


@router.post("", response_model=JournalEntryResponse, status_code=201)
def create_journal_entry(
    request: JournalEntryCreateRequest,
    store: DataStore = Depends(get_data_store),
) -> JournalEntryResponse:
    """Log a market review."""
    entry = store.add_journal_entry(JournalEntryCreate(**request.model_dump()))
    if entry is None:
        raise StorageError("Journal entry could not be saved")
    return JournalEntryResponse.model_validate(entry)


@router.delete("/{entry_id}", status_code=204)
def delete_journal_entry(
    entry_id: str,
    confirm: bool = Query(False, description="Must be true to delete"),
    store: DataStore = Depends(get_data_store),
) -> Response:
    """Delete a journal entry."""
    if not confirm:
        raise ValidationError("Deleting a journal entry requires confirm=true")
    if not store.delete_journal_entry(entry_id):
        raise StorageError("Journal entry could not be deleted")
    return Response(status_code=204)
