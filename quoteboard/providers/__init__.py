"""Remote quote providers."""
from .alphavantage import AlphaVantageClient

__all__ = ["AlphaVantageClient"]
