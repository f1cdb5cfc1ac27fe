"""JournalEntry domain model."""

from dataclasses import dataclass
from datetime import date

from tradedesk.domain.models.enums import Sentiment


@dataclass
class JournalEntry:
    """
    Daily market review.

    Entries are never edited; they are created or deleted as a whole.
    """

    id: str
    date: date
    macro_review: str
    alts_market: str
    summary: str
    sentiment: Sentiment

    def __post_init__(self) -> None:
        if isinstance(self.sentiment, str):
            self.sentiment = Sentiment(self.sentiment)
