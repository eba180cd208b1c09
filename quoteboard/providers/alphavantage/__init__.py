"""Alpha Vantage GLOBAL_QUOTE provider."""
from .client import AlphaVantageClient

__all__ = ["AlphaVantageClient"]
