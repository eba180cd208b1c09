"""Fan-out/fan-in of quote lookups for one batch of symbols."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from itertools import islice

from ..errors import TransportError
from ..interfaces.quote_client import QuoteClient
from ..models import AggregateResult, FetchOutcome, QuoteBatch

logger = logging.getLogger(__name__)

# Hard cap on lookups per run, whatever the source provides.
MAX_SYMBOLS_PER_RUN = 25


class QuoteAggregator:
    """Fetch every symbol concurrently and keep only the quotes that arrived.

    Each run is independent: the aggregator keeps no state between runs, and
    overlapping runs are not coordinated against each other.
    """

    def __init__(
        self, client: QuoteClient, max_symbols: int = MAX_SYMBOLS_PER_RUN
    ) -> None:
        if max_symbols < 1:
            raise ValueError(f"max_symbols must be at least 1, got {max_symbols}")
        self._client = client
        self._max_symbols = max_symbols

    async def _fetch_one(self, symbol: str) -> FetchOutcome:
        try:
            return await self._client.fetch(symbol)
        except Exception as e:
            # Clients are expected to return failures, not raise them
            logger.debug("Quote client raised for %s: %s", symbol, e)
            return FetchOutcome.failure(symbol, TransportError(str(e)))

    async def collect(self, symbols: Iterable[str]) -> AggregateResult:
        """Run one aggregation and report how many fetches were dropped."""
        batch = tuple(islice(symbols, self._max_symbols))
        if not batch:
            return AggregateResult()

        logger.debug("Requesting quotes for %d symbols", len(batch))
        outcomes = await asyncio.gather(*(self._fetch_one(s) for s in batch))

        quotes = tuple(o.quote for o in outcomes if o.quote is not None)
        for outcome in outcomes:
            if not outcome.ok:
                logger.debug("Dropping %s: %s", outcome.symbol, outcome.error)

        return AggregateResult(quotes=quotes, requested=len(batch))

    async def run(self, symbols: Iterable[str]) -> QuoteBatch:
        """Return the quotes for the first symbols, failures silently dropped."""
        result = await self.collect(symbols)
        return result.quotes
