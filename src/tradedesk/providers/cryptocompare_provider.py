"""CryptoCompare multi-symbol quote client."""

import logging
from typing import Optional

import requests

from tradedesk.core.exceptions import PriceFeedError

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://min-api.cryptocompare.com/data/pricemulti"
DEFAULT_TIMEOUT_SECONDS = 10.0
TARGET_CURRENCY = "USD"


class CryptoComparePriceFeed:
    """
    Fetches crypto spot prices from the public CryptoCompare ``pricemulti`` endpoint.

    Response shape: ``{"BTC": {"USD": 64000.1}, "ETH": {"USD": 3100.5}}``.
    Symbols the service does not know are simply missing from the body.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def get_prices(self, tickers: list[str]) -> dict[str, float]:
        symbols = sorted({t.strip().upper() for t in tickers if t and t.strip()})
        if not symbols:
            return {}

        params = {"fsyms": ",".join(symbols), "tsyms": TARGET_CURRENCY}
        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise PriceFeedError(f"Crypto price request failed: {e}")

        if not isinstance(data, dict):
            raise PriceFeedError(f"Unexpected price response: {data!r}")
        # Errors come back as 200 with {"Response": "Error", "Message": ...}
        if data.get("Response") == "Error":
            raise PriceFeedError(f"Price service error: {data.get('Message')}")

        prices: dict[str, float] = {}
        for ticker, quote in data.items():
            if not isinstance(quote, dict) or TARGET_CURRENCY not in quote:
                continue
            try:
                prices[ticker.upper()] = float(quote[TARGET_CURRENCY])
            except (TypeError, ValueError):
                logger.warning(f"Skipping non-numeric price for {ticker}: {quote!r}")
        return prices
