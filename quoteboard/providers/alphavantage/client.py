"""Alpha Vantage quote client — one GLOBAL_QUOTE request per symbol."""
from __future__ import annotations

import asyncio
import logging
import ssl
from typing import Any
from urllib.parse import urlsplit

import aiohttp
import certifi

from ...config import QuoteServiceConfig
from ...errors import DecodeError, InvalidRequestError, QuoteFetchError, TransportError
from ...models import FetchOutcome
from . import parser

logger = logging.getLogger(__name__)


class AlphaVantageClient:
    """Fetch current quotes from the Alpha Vantage query endpoint."""

    def __init__(self, config: QuoteServiceConfig) -> None:
        self.base_url = config.base_url
        self.function = config.function
        self._api_key = config.api_key

    def build_params(self, symbol: str) -> dict[str, str]:
        """Return the query parameters for one symbol's lookup."""
        if not isinstance(symbol, str) or not symbol.strip():
            raise InvalidRequestError(f"Cannot build a request for symbol {symbol!r}")

        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidRequestError(f"Invalid quote endpoint: {self.base_url!r}")

        return {"function": self.function, "symbol": symbol, "apikey": self._api_key}

    async def _get_json(self, params: dict[str, str]) -> Any:
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.get(self.base_url, params=params) as response:
                    if not 200 <= response.status < 300:
                        raise TransportError(f"HTTP {response.status}")
                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        raise DecodeError(f"Response is not valid JSON: {e}") from e
        except aiohttp.InvalidURL as e:
            raise InvalidRequestError(f"Invalid request URL: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise TransportError(str(e) or type(e).__name__) from e

    async def fetch(self, symbol: str) -> FetchOutcome:
        """Fetch one symbol's quote. Failures come back as a failed outcome."""
        try:
            params = self.build_params(symbol)
            payload = await self._get_json(params)
            quote = parser.parse_global_quote(payload)
        except QuoteFetchError as e:
            logger.debug("Quote lookup for %s failed: %s", symbol, e)
            return FetchOutcome.failure(symbol, e)

        logger.debug("Quote lookup for %s: $%.2f", symbol, quote.price)
        return FetchOutcome.success(symbol, quote)
