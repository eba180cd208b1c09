"""Quote client protocol — one remote lookup per symbol."""
from typing import Protocol

from ..models import FetchOutcome


class QuoteClient(Protocol):
    """Abstract interface for fetching a single symbol's quote."""

    async def fetch(self, symbol: str) -> FetchOutcome: ...
