"""
Validation Pipeline - Ordered Rule Checks over a Conversion Request

Runs the swap rules in a fixed order and reports the FIRST violated rule.
Later rules are never evaluated once one fails, so an invalid amount is
reported even when the currencies are also identical or unpriced.

Files that USE this module:
- xswap.application.controller (validates before submitting)
- tests.test_validation (unit tests)

Files that this module USES:
- xswap.domain.models (ConversionRequest, ErrorKind)
- xswap.domain.catalog (PriceCatalog)
- xswap.shared.validators (validate_positive_amount)
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from xswap.domain.catalog import PriceCatalog
from xswap.domain.models import ConversionRequest, ErrorKind
from xswap.shared.validators import validate_positive_amount

log = logging.getLogger(__name__)

Rule = Callable[[ConversionRequest, PriceCatalog], Optional[ErrorKind]]


def check_amount(request: ConversionRequest, catalog: PriceCatalog) -> Optional[ErrorKind]:
    if not validate_positive_amount(request.from_amount_text):
        return ErrorKind.INVALID_AMOUNT
    return None


def check_currencies_selected(request: ConversionRequest, catalog: PriceCatalog) -> Optional[ErrorKind]:
    if not request.from_currency or not request.to_currency:
        return ErrorKind.MISSING_CURRENCIES
    return None


def check_currencies_differ(request: ConversionRequest, catalog: PriceCatalog) -> Optional[ErrorKind]:
    if request.from_currency == request.to_currency:
        return ErrorKind.SAME_CURRENCIES
    return None


def check_prices_available(request: ConversionRequest, catalog: PriceCatalog) -> Optional[ErrorKind]:
    if not catalog.has_prices(request.from_currency, request.to_currency):
        return ErrorKind.PRICE_UNAVAILABLE
    return None


# Order is significant: the first failing rule wins.
RULES: tuple[Rule, ...] = (
    check_amount,
    check_currencies_selected,
    check_currencies_differ,
    check_prices_available,
)


def validate(request: ConversionRequest, catalog: PriceCatalog) -> Optional[ErrorKind]:
    """
    Validate a conversion request against a price catalog.

    Args:
        request: The request to check
        catalog: Price snapshot for the session

    Returns:
        None if the request can be quoted, otherwise the first violated ErrorKind
    """
    for rule in RULES:
        error = rule(request, catalog)
        if error is not None:
            log.debug("Request %s rejected by %s: %s", request, rule.__name__, error.name)
            return error
    return None
