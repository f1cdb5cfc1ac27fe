"""Journal entry repository protocol."""

from typing import Any, Protocol

from tradedesk.domain.models import JournalEntry


class JournalRepository(Protocol):
    """Interface for journal entry data access.

    Implementations raise StorageError when the backend rejects a call.
    """

    def list_all(self) -> list[JournalEntry]:
        """List all entries, newest first."""
        ...

    def insert(self, entry: JournalEntry) -> None:
        """Persist a new entry at the front of the collection."""
        ...

    def update(self, entry_id: str, fields: dict[str, Any]) -> None:
        """Apply a partial update (domain attribute names)."""
        ...

    def delete(self, entry_id: str) -> None:
        """Delete an entry (hard delete)."""
        ...
