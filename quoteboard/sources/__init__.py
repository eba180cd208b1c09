"""Symbol sources."""
from .json_file import JsonSymbolSource
from .static import StaticSymbolSource

__all__ = ["JsonSymbolSource", "StaticSymbolSource"]
