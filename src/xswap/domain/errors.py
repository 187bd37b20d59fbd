"""
Domain Errors - Engine Exceptions

This module defines exceptions for failures that are NOT user-facing
validation outcomes. Validation outcomes are ErrorKind values recorded on
the session and are never raised.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class PriceFeedError(DomainError):
    """Raised when the price feed cannot be fetched or parsed."""
    pass


class QuoteError(DomainError):
    """Raised when a quote is requested for a request that cannot be priced."""
    pass
