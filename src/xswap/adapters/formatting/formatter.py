"""
Swap Formatter - Display Text for a Swap Session

This module turns a SwapSession and the price catalog into the strings a
presentation layer shows: the exchange rate line, the approximate USD
values, the status message and the hint under the submit button. It also
reports which buttons should be enabled.

Files that USE this module:
- tests.test_formatter (unit tests)

Files that this module USES:
- xswap.application.quote (exchange_rate, usd_value, format_fixed)
- xswap.adapters.icons (token_icon_url)
- xswap.domain.currencies (CURRENCIES for the selector options)
- xswap.domain.models (SwapSession)
- xswap.shared.validators (validate_positive_amount)
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from xswap.adapters.icons import token_icon_url
from xswap.application.quote import exchange_rate, format_fixed, usd_value
from xswap.domain.catalog import PriceCatalog
from xswap.domain.currencies import CURRENCIES
from xswap.domain.models import SwapSession
from xswap.shared.validators import validate_positive_amount

SUCCESS_MESSAGE = "Swap completed successfully!"
HINT_IDLE = "Click to execute the swap transaction"
HINT_SUBMITTING = "Please wait while we process your transaction..."


def exchange_rate_line(
    from_currency: str,
    to_currency: str,
    catalog: PriceCatalog,
    from_amount_text: str = "1",
) -> Optional[str]:
    """
    Format the exchange rate line.

    Args:
        from_currency: Source currency code
        to_currency: Target currency code
        catalog: Price snapshot
        from_amount_text: Amount typed so far; the line is hidden while empty

    Returns:
        "1 ETH = 2000.000000 USDC", or None when there is nothing to show
    """
    if not from_amount_text:
        return None
    rate = exchange_rate(from_currency, to_currency, catalog)
    if rate <= 0:
        return None
    return f"1 {from_currency} = {format_fixed(rate)} {to_currency}"


def usd_value_line(amount_text: str, currency: str, catalog: PriceCatalog) -> Optional[str]:
    """
    Format the approximate USD value of an amount.

    Returns:
        "≈ $2000.00 USD", or None when the amount or price is unavailable
    """
    value = usd_value(amount_text, currency, catalog)
    if value is None:
        return None
    return f"≈ ${format_fixed(value, 2)} USD"


def status_message(session: SwapSession) -> str:
    """Error message, success message, or an empty string."""
    if session.error is not None:
        return session.error.message
    if session.succeeded:
        return SUCCESS_MESSAGE
    return ""


def submit_hint(session: SwapSession) -> str:
    return HINT_SUBMITTING if session.is_submitting else HINT_IDLE


def currency_options(currencies: Sequence[str] = CURRENCIES) -> List[Tuple[str, str]]:
    """Pair each currency code with its icon URL, preserving order.

    Defaults to the supported currency list.
    """
    return [(code, token_icon_url(code)) for code in currencies]


def session_view(session: SwapSession, catalog: PriceCatalog) -> Dict[str, Any]:
    """
    Everything a swap form needs to render one session.

    The submit button requires a positive amount and no submit in flight;
    reset is disabled while submitting.
    """
    from_usd = None
    if validate_positive_amount(session.from_amount_text):
        from_usd = usd_value_line(session.from_amount_text, session.from_currency, catalog)
    to_usd = None
    if session.to_amount_text:
        to_usd = usd_value_line(session.to_amount_text, session.to_currency, catalog)

    return {
        "state": session.state.value,
        "from_currency": session.from_currency,
        "to_currency": session.to_currency,
        "from_amount": session.from_amount_text,
        "to_amount": session.to_amount_text,
        "from_usd": from_usd,
        "to_usd": to_usd,
        "rate_line": exchange_rate_line(
            session.from_currency, session.to_currency, catalog, session.from_amount_text
        ),
        "error": session.error_message,
        "success": SUCCESS_MESSAGE if session.succeeded else "",
        "hint": submit_hint(session),
        "submit_enabled": (
            not session.is_submitting and validate_positive_amount(session.from_amount_text)
        ),
        "reset_enabled": not session.is_submitting,
    }
