"""Shared test fixtures and sample data."""
from __future__ import annotations

import asyncio
import json
import textwrap
from pathlib import Path

import pytest

from quoteboard.config import (
    AppConfig,
    QuoteServiceConfig,
    RefreshConfig,
    SymbolsConfig,
)
from quoteboard.errors import DecodeError, QuoteFetchError
from quoteboard.models import FetchOutcome, Quote


# ---------------------------------------------------------------------------
# Fake quote client
# ---------------------------------------------------------------------------


class FakeQuoteClient:
    """In-memory quote client that records every lookup.

    ``prices`` maps symbol to price; any other symbol fails with DecodeError
    unless ``failures`` names a specific error for it. ``delays`` maps symbol
    to seconds slept before the outcome.
    """

    def __init__(
        self,
        prices: dict[str, float] | None = None,
        delays: dict[str, float] | None = None,
        failures: dict[str, QuoteFetchError] | None = None,
    ) -> None:
        self.prices = dict(prices or {})
        self.delays = dict(delays or {})
        self.failures = dict(failures or {})
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, symbol: str) -> FetchOutcome:
        self.calls.append(symbol)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(symbol, 0))
            if symbol in self.failures:
                return FetchOutcome.failure(symbol, self.failures[symbol])
            if symbol not in self.prices:
                return FetchOutcome.failure(symbol, DecodeError("no quote"))
            return FetchOutcome.success(symbol, Quote(symbol, self.prices[symbol]))
        finally:
            self.in_flight -= 1
            self.completed.append(symbol)


@pytest.fixture()
def fake_client() -> FakeQuoteClient:
    return FakeQuoteClient(prices={"AAPL": 150.0, "MSFT": 300.0})


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_quote_service_config() -> QuoteServiceConfig:
    return QuoteServiceConfig(
        base_url="https://quotes.example.com/query",
        function="GLOBAL_QUOTE",
        api_key="test-key",
    )


@pytest.fixture()
def tickers_path(tmp_path: Path) -> Path:
    path = tmp_path / "tickers.json"
    path.write_text(
        json.dumps([{"ticker": "AAPL"}, {"ticker": "MSFT"}, {"ticker": "BADSYM"}])
    )
    return path


@pytest.fixture()
def sample_app_config(
    sample_quote_service_config: QuoteServiceConfig, tickers_path: Path
) -> AppConfig:
    return AppConfig(
        quote_service=sample_quote_service_config,
        symbols=SymbolsConfig(path=str(tickers_path), ticker_field="ticker"),
        refresh=RefreshConfig(interval_seconds=30),
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    quote_service:
      base_url: "https://quotes.example.com/query"
      function: GLOBAL_QUOTE
      api_key: "yaml-key"
    symbols:
      path: tickers.json
      ticker_field: ticker
    refresh:
      interval_seconds: 45
      single_flight: true
      report_dropped: false
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample API responses
# ---------------------------------------------------------------------------


def make_global_quote(symbol: str, price: str) -> dict:
    return {
        "Global Quote": {
            "01. symbol": symbol,
            "02. open": "148.0000",
            "03. high": "151.2000",
            "04. low": "147.5000",
            "05. price": price,
            "06. volume": "51234567",
            "07. latest trading day": "2025-03-05",
            "08. previous close": "149.0000",
            "09. change": "1.0000",
            "10. change percent": "0.6711%",
        }
    }


@pytest.fixture()
def sample_global_quote() -> dict:
    return make_global_quote("AAPL", "150.0000")


@pytest.fixture()
def client_factory() -> type[FakeQuoteClient]:
    return FakeQuoteClient


@pytest.fixture()
def quote_payload_factory():
    return make_global_quote
