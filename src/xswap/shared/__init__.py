"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Input validation
- Logging configuration
"""

from xswap.shared.validators import (
    AMOUNT_PATTERN,
    parse_amount,
    validate_currency_code,
    validate_positive_amount,
)
from xswap.shared.logging_conf import setup_logging

__all__ = [
    "AMOUNT_PATTERN",
    "parse_amount",
    "validate_currency_code",
    "validate_positive_amount",
    "setup_logging",
]
