"""Symbol source backed by a JSON file of ``{"ticker": ...}`` objects."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from ..config import SymbolsConfig
from ..errors import SymbolLoadError
from ..models import SymbolBatch

logger = logging.getLogger(__name__)


def parse_symbols(data: Any, ticker_field: str = "ticker") -> SymbolBatch:
    """Extract symbols from a decoded JSON array, preserving file order."""
    if not isinstance(data, list):
        raise SymbolLoadError(
            f"Symbol file must contain a JSON array, got {type(data).__name__}"
        )

    symbols: list[str] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise SymbolLoadError(f"Entry {index} is not an object: {entry!r}")
        ticker = entry.get(ticker_field)
        if not isinstance(ticker, str):
            raise SymbolLoadError(
                f"Entry {index} has no string '{ticker_field}' field: {entry!r}"
            )
        symbols.append(ticker)
    return tuple(symbols)


class JsonSymbolSource:
    """Read the ticker list from disk on every load."""

    def __init__(self, config: SymbolsConfig) -> None:
        self.path = Path(config.path)
        self.ticker_field = config.ticker_field

    def _read(self) -> SymbolBatch:
        if not self.path.is_file():
            raise SymbolLoadError(f"Symbol file not found: {self.path}")

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SymbolLoadError(f"Could not read symbol file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SymbolLoadError(f"Symbol file {self.path} is not valid JSON: {e}") from e

        return parse_symbols(data, self.ticker_field)

    async def load(self) -> SymbolBatch:
        """Load the symbols; raises SymbolLoadError if the file is missing or malformed."""
        symbols = await asyncio.to_thread(self._read)
        logger.info("Loaded %d tickers from %s", len(symbols), self.path)
        return symbols
