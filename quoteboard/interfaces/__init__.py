"""Protocol interfaces for the quote board."""
from .quote_client import QuoteClient
from .symbol_source import SymbolSource

__all__ = ["QuoteClient", "SymbolSource"]
