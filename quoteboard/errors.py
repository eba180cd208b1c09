"""Exception hierarchy."""


class QuoteboardError(Exception):
    """Base class for all quoteboard errors."""


class SymbolLoadError(QuoteboardError):
    """The symbol source could not produce a batch of symbols."""


class QuoteFetchError(QuoteboardError):
    """A single symbol's quote lookup ended without a quote."""


class InvalidRequestError(QuoteFetchError):
    """No request could be built for the symbol."""


class TransportError(QuoteFetchError):
    """The request could not complete or returned a non-2xx status."""


class DecodeError(QuoteFetchError):
    """The response body did not match the expected quote envelope."""
