"""
Formatting Adapters - Display Text

This package contains formatting helpers for presenting swap sessions.
"""

from xswap.adapters.formatting.formatter import (
    currency_options,
    exchange_rate_line,
    session_view,
    status_message,
    usd_value_line,
)

__all__ = [
    "currency_options",
    "exchange_rate_line",
    "session_view",
    "status_message",
    "usd_value_line",
]
