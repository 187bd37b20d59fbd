"""
Provider Adapters - External API Clients

This package contains adapters for the external price feed.
"""

from xswap.adapters.providers.prices import PriceFeedProvider

__all__ = [
    "PriceFeedProvider",
]
