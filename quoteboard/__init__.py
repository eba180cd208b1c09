"""Concurrent stock quote board backed by the Alpha Vantage quote API."""
