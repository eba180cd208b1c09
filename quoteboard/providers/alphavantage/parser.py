"""Pure parsing functions for Alpha Vantage GLOBAL_QUOTE responses."""
from __future__ import annotations

from typing import Any

from ...errors import DecodeError
from ...models import Quote

ENVELOPE_KEY = "Global Quote"
SYMBOL_KEY = "01. symbol"
PRICE_KEY = "05. price"

# Keys Alpha Vantage uses instead of a quote when it refuses a request
_SERVICE_MESSAGE_KEYS = ("Error Message", "Note", "Information")


def service_message(payload: Any) -> str | None:
    """Return the service's explanatory message, if the payload carries one."""
    if not isinstance(payload, dict):
        return None
    for key in _SERVICE_MESSAGE_KEYS:
        message = payload.get(key)
        if isinstance(message, str) and message:
            return message
    return None


def parse_price(raw: Any) -> float:
    """Parse a price string such as ``"150.0000"``."""
    if not isinstance(raw, str):
        raise DecodeError(f"Price field is not a string: {raw!r}")
    try:
        return float(raw.strip())
    except ValueError as e:
        raise DecodeError(f"Price is not a number: {raw!r}") from e


def parse_global_quote(payload: Any) -> Quote:
    """Decode a GLOBAL_QUOTE response body into a Quote.

    Raises DecodeError when the envelope or its symbol/price fields are
    missing, or the price is not a finite non-negative number.
    """
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    envelope = payload.get(ENVELOPE_KEY)
    if not isinstance(envelope, dict):
        message = service_message(payload)
        if message:
            raise DecodeError(f"No quote in response: {message}")
        raise DecodeError(f"Response has no '{ENVELOPE_KEY}' object")

    symbol = envelope.get(SYMBOL_KEY)
    if not isinstance(symbol, str) or not symbol:
        raise DecodeError(f"Missing '{SYMBOL_KEY}' field")

    if PRICE_KEY not in envelope:
        raise DecodeError(f"Missing '{PRICE_KEY}' field for {symbol}")
    price = parse_price(envelope[PRICE_KEY])

    try:
        return Quote(symbol=symbol, price=price)
    except ValueError as e:
        raise DecodeError(str(e)) from e
