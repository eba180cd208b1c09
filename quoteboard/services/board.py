"""Quote board orchestration — symbols in, one quote batch out to the store."""
from __future__ import annotations

import asyncio
import logging

from ..config import AppConfig
from ..errors import SymbolLoadError
from ..interfaces.quote_client import QuoteClient
from ..interfaces.symbol_source import SymbolSource
from ..models import QuoteBatch
from ..providers import AlphaVantageClient
from ..sources import JsonSymbolSource
from .aggregator import QuoteAggregator
from .store import QuoteStore

logger = logging.getLogger(__name__)


class QuoteBoard:
    """Owns the quote store and refreshes it from the symbol source."""

    def __init__(
        self,
        config: AppConfig,
        source: SymbolSource | None = None,
        client: QuoteClient | None = None,
        store: QuoteStore | None = None,
    ) -> None:
        self._config = config
        self._source: SymbolSource = source or JsonSymbolSource(config.symbols)
        self._client: QuoteClient = client or AlphaVantageClient(config.quote_service)
        self._aggregator = QuoteAggregator(self._client)
        self.store = store or QuoteStore()
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        """Number of refreshes currently running."""
        return self._in_flight

    async def refresh(self) -> QuoteBatch | None:
        """Load symbols, fetch their quotes and publish the batch.

        Returns the published batch, or None when the symbols could not be
        loaded or the refresh was skipped by the single-flight guard.
        """
        if self._config.refresh.single_flight and self._in_flight:
            logger.info("Refresh already in progress, skipping")
            return None

        self._in_flight += 1
        try:
            return await self._refresh()
        finally:
            self._in_flight -= 1

    async def _refresh(self) -> QuoteBatch | None:
        try:
            symbols = await self._source.load()
        except SymbolLoadError as e:
            logger.error("Could not load symbols: %s", e)
            self.store.publish_error(str(e))
            return None

        self.store.clear_error()
        if not symbols:
            logger.info("No tickers to fetch")
        else:
            logger.info("Fetching quotes for %s", ", ".join(symbols[:5]))

        if self._config.refresh.report_dropped:
            result = await self._aggregator.collect(symbols)
            if result.dropped:
                logger.warning(
                    "Dropped %d of %d quote lookups", result.dropped, result.requested
                )
            quotes = result.quotes
        else:
            quotes = await self._aggregator.run(symbols)

        logger.info("Received %d quotes", len(quotes))
        self.store.publish_quotes(quotes)
        return quotes

    async def run_continuous(self, interval_seconds: int | None = None) -> None:
        """Refresh forever, sleeping between runs."""
        interval = (
            self._config.refresh.interval_seconds
            if interval_seconds is None
            else interval_seconds
        )
        if interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval}")
        logger.info("Starting continuous refresh (every %d seconds)", interval)

        while True:
            try:
                await self.refresh()
            except Exception as e:
                logger.error("Error in refresh loop: %s", e)
            await asyncio.sleep(interval)
