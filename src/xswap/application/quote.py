"""
Quote Computer - Rate and Converted Amount for a Validated Request

This module computes quotes from a price snapshot. Arithmetic is plain
binary floating point; only the final display string goes through Decimal
so that rounding is half away from zero on the float's shortest decimal
representation. Precision beyond ~15 significant digits is not guaranteed.

Files that USE this module:
- xswap.application.controller (computes the quote after the submit delay)
- xswap.adapters.formatting.formatter (exchange rate and USD value lines)
- tests.test_quote (unit tests)

Files that this module USES:
- xswap.domain.models (ConversionRequest, Quote)
- xswap.domain.catalog (PriceCatalog)
- xswap.domain.errors (QuoteError)
- xswap.shared.validators (parse_amount)
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from xswap.domain.catalog import PriceCatalog
from xswap.domain.errors import QuoteError
from xswap.domain.models import ConversionRequest, Quote
from xswap.shared.validators import parse_amount

log = logging.getLogger(__name__)

QUOTE_DECIMALS = 6


def format_fixed(value: float, decimals: int = QUOTE_DECIMALS) -> str:
    """
    Format a float with a fixed number of fractional digits.

    Rounds half away from zero, e.g. 0.0000005 -> "0.000001".

    Args:
        value: Number to format
        decimals: Number of fractional digits (default: 6)

    Returns:
        Decimal string such as "2000.000000"
    """
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def exchange_rate(from_currency: str, to_currency: str, catalog: PriceCatalog) -> float:
    """
    Units of target currency per unit of source currency.

    Returns:
        The rate, or 0.0 when either currency is unset or unpriced
    """
    if not from_currency or not to_currency:
        return 0.0
    from_price = catalog.price(from_currency)
    to_price = catalog.price(to_currency)
    if from_price is None or to_price is None:
        return 0.0
    return from_price / to_price


def usd_value(amount_text: str, currency: str, catalog: PriceCatalog) -> Optional[float]:
    """
    Reference-unit (USD) value of an amount, or None when not computable.
    """
    amount = parse_amount(amount_text)
    price = catalog.price(currency) if currency else None
    if amount is None or price is None:
        return None
    return amount * price


def compute_quote(request: ConversionRequest, catalog: PriceCatalog) -> Quote:
    """
    Compute the quote for a request that already passed validation.

    Args:
        request: Validated conversion request
        catalog: Price snapshot used for validation

    Returns:
        Quote with rate = price[from] / price[to] and the converted amount

    Raises:
        QuoteError: If the amount does not parse or a price is missing
    """
    amount = parse_amount(request.from_amount_text)
    if amount is None:
        raise QuoteError(f"Unparseable amount: {request.from_amount_text!r}")

    rate = exchange_rate(request.from_currency, request.to_currency, catalog)
    if rate <= 0:
        raise QuoteError(
            f"No price for {request.from_currency} -> {request.to_currency}"
        )

    to_amount = format_fixed(amount * rate)
    log.debug(
        "Quoted %s %s -> %s %s (rate=%s)",
        request.from_amount_text, request.from_currency, to_amount, request.to_currency, rate,
    )
    return Quote(rate=rate, to_amount=to_amount)
