"""Symbol source protocol — where the tickers to fetch come from."""
from typing import Protocol

from ..models import SymbolBatch


class SymbolSource(Protocol):
    """Abstract interface for loading symbols; raises SymbolLoadError on failure."""

    async def load(self) -> SymbolBatch: ...
