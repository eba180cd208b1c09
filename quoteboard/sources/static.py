"""Fixed in-memory symbol list."""
from __future__ import annotations

from collections.abc import Iterable

from ..models import SymbolBatch


class StaticSymbolSource:
    """Serve the same symbols on every load."""

    def __init__(self, symbols: Iterable[str]) -> None:
        self._symbols: SymbolBatch = tuple(symbols)

    async def load(self) -> SymbolBatch:
        return self._symbols
