"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from xswap.domain.catalog import PriceCatalog
from xswap.domain.models import (
    ConversionRequest,
    ErrorKind,
    Quote,
    SessionState,
    SwapSession,
)
from xswap.domain.errors import (
    DomainError,
    PriceFeedError,
    QuoteError,
)

__all__ = [
    "PriceCatalog",
    "ConversionRequest",
    "ErrorKind",
    "Quote",
    "SessionState",
    "SwapSession",
    "DomainError",
    "PriceFeedError",
    "QuoteError",
]
