"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class QuoteServiceConfig:
    base_url: str = DEFAULT_BASE_URL
    function: str = "GLOBAL_QUOTE"
    api_key: str = ""


@dataclass(frozen=True)
class SymbolsConfig:
    path: str = "tickers.json"
    ticker_field: str = "ticker"


@dataclass(frozen=True)
class RefreshConfig:
    interval_seconds: int = 60
    single_flight: bool = False
    report_dropped: bool = False


@dataclass(frozen=True)
class AppConfig:
    quote_service: QuoteServiceConfig = field(default_factory=QuoteServiceConfig)
    symbols: SymbolsConfig = field(default_factory=SymbolsConfig)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0", ""}


def _as_bool(value: Any, name: str) -> bool:
    """Read a YAML flag; quoted strings like "false" are parsed, not truth-tested."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _build_quote_service(raw: dict[str, Any]) -> QuoteServiceConfig:
    return QuoteServiceConfig(
        base_url=str(raw.get("base_url", DEFAULT_BASE_URL)),
        function=str(raw.get("function", "GLOBAL_QUOTE")),
        api_key=str(raw.get("api_key") or ""),
    )


def _build_symbols(raw: dict[str, Any], base_dir: Path) -> SymbolsConfig:
    path = str(raw.get("path", "tickers.json"))
    # Relative symbol files live next to the config file
    if path and not Path(path).is_absolute():
        path = str(base_dir / path)
    return SymbolsConfig(
        path=path,
        ticker_field=str(raw.get("ticker_field", "ticker")),
    )


def _build_refresh(raw: dict[str, Any]) -> RefreshConfig:
    return RefreshConfig(
        interval_seconds=int(raw.get("interval_seconds", 60)),
        single_flight=_as_bool(raw.get("single_flight", False), "refresh.single_flight"),
        report_dropped=_as_bool(raw.get("report_dropped", False), "refresh.report_dropped"),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)
    base_dir = config_path.resolve().parent

    cfg = AppConfig(
        quote_service=_build_quote_service(raw.get("quote_service") or {}),
        symbols=_build_symbols(raw.get("symbols") or {}, base_dir),
        refresh=_build_refresh(raw.get("refresh") or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.quote_service.api_key:
        raise ValueError(
            "Quote service api_key is not configured "
            "(set quote_service.api_key or ALPHAVANTAGE_API_KEY)"
        )
    if not cfg.quote_service.base_url:
        raise ValueError("Quote service base_url must not be empty")
    if not cfg.symbols.path:
        raise ValueError("symbols.path must not be empty")
    if not cfg.symbols.ticker_field:
        raise ValueError("symbols.ticker_field must not be empty")
    if cfg.refresh.interval_seconds <= 0:
        raise ValueError(
            f"refresh.interval_seconds must be positive, got {cfg.refresh.interval_seconds}"
        )
