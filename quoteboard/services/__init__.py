"""Service modules"""
from .aggregator import MAX_SYMBOLS_PER_RUN, QuoteAggregator
from .store import QuoteStore
from .board import QuoteBoard

__all__ = ["MAX_SYMBOLS_PER_RUN", "QuoteAggregator", "QuoteStore", "QuoteBoard"]
