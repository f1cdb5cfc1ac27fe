"""Price feed protocol."""

from typing import Protocol


class PriceFeed(Protocol):
    """
    Protocol for batched spot-price sources.

    Implementations issue at most one request per call and raise
    PriceFeedError on network failure or an unusable response.
    """

    def get_prices(self, tickers: list[str]) -> dict[str, float]:
        """
        Fetch USD prices for multiple tickers.

        Returns dict mapping uppercased ticker -> price.
        Tickers unknown to the source are omitted from result.
        """
        ...
