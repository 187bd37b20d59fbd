"""
Reversal Operator - Swap the Conversion Direction

Swaps the selected currencies and mirrors the displayed amounts verbatim.
No validation runs and no quote is recomputed, so after a reversal the
target amount may not match the new direction's rate until the user
submits again.

Files that USE this module:
- xswap.application.session (Reverse event)
- tests.test_session (reverse unit tests)

Files that this module USES:
- xswap.domain.models (SwapSession)
"""
from __future__ import annotations

from dataclasses import replace

from xswap.domain.models import SwapSession


def reverse(session: SwapSession) -> SwapSession:
    """
    Return a session with the direction swapped.

    from' = to, to' = from, from_amount' = to_amount, to_amount' = from_amount.
    State, error and success flags are left as they are.
    """
    return replace(
        session,
        from_currency=session.to_currency,
        to_currency=session.from_currency,
        from_amount_text=session.to_amount_text,
        to_amount_text=session.from_amount_text,
    )
