"""Data models — all frozen (immutable)."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real

from .errors import QuoteFetchError

Symbol = str
SymbolBatch = tuple[Symbol, ...]


@dataclass(frozen=True)
class Quote:
    """A ticker symbol paired with its latest price."""

    symbol: Symbol
    price: float

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or not self.symbol:
            raise ValueError("Quote symbol must be a non-empty string")
        if isinstance(self.price, bool) or not isinstance(self.price, Real):
            raise ValueError(f"Quote price for {self.symbol} must be a number")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(
                f"Quote price for {self.symbol} must be finite and non-negative, "
                f"got {self.price!r}"
            )


QuoteBatch = tuple[Quote, ...]


@dataclass(frozen=True)
class FetchOutcome:
    """Terminal result of one symbol's lookup: a quote or the error that ended it."""

    symbol: Symbol
    quote: Quote | None = None
    error: QuoteFetchError | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if (self.quote is None) == (self.error is None):
            raise ValueError(
                f"FetchOutcome for {self.symbol} needs exactly one of quote or error"
            )

    @classmethod
    def success(cls, symbol: Symbol, quote: Quote) -> FetchOutcome:
        return cls(symbol=symbol, quote=quote)

    @classmethod
    def failure(cls, symbol: Symbol, error: QuoteFetchError) -> FetchOutcome:
        return cls(symbol=symbol, error=error)

    @property
    def ok(self) -> bool:
        return self.quote is not None


@dataclass(frozen=True)
class AggregateResult:
    """Quotes from one aggregation run plus how many fetches were dropped."""

    quotes: QuoteBatch = ()
    requested: int = 0

    @property
    def dropped(self) -> int:
        return self.requested - len(self.quotes)


@dataclass(frozen=True)
class QuoteState:
    """Snapshot of what the board currently displays."""

    quotes: QuoteBatch = ()
    error: str | None = None
