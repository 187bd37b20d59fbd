"""
Input Validation Utilities - Amount and Currency Checks

This module provides the low-level input checks used by the validation
pipeline and by the settings model: parsing of raw amount text and the
shape of currency codes.

Files that USE this module:
- xswap.application.validation (parse_amount for the amount rule)
- xswap.application.quote (parse_amount for quote and USD value)
- xswap.config.settings (validate_currency_code in field validators)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from typing import Optional

# Optional digits, optional single decimal point, optional digits
AMOUNT_PATTERN = re.compile(r'\d*\.?\d*', re.ASCII)

# Tickers such as ETH, axlUSDC, wstETH, YieldUSD
CURRENCY_CODE_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9]{0,15}')


def parse_amount(text: Optional[str]) -> Optional[float]:
    """
    Parse raw amount text into a float.

    The text must match AMOUNT_PATTERN before it is treated as numeric, so
    signs, exponents, whitespace and thousands separators are rejected.

    Args:
        text: Raw amount text typed by the user

    Returns:
        Parsed float, or None if the text is empty or not a plain decimal
    """
    if not text:
        return None

    if not AMOUNT_PATTERN.fullmatch(text):
        return None

    try:
        value = float(text)
    except ValueError:
        # "." matches the pattern but is not a number
        return None

    if not math.isfinite(value):
        return None
    return value


def validate_positive_amount(text: Optional[str]) -> bool:
    """
    Validate that amount text parses to a number greater than zero.

    Args:
        text: Raw amount text

    Returns:
        True if valid, False otherwise
    """
    value = parse_amount(text)
    return value is not None and value > 0


def validate_currency_code(code: str) -> bool:
    """
    Validate currency code format.

    Args:
        code: Currency code to validate

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(CURRENCY_CODE_PATTERN.fullmatch(code))
