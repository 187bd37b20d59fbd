"""
Session Transitions - Pure (session, event) -> session Function

Every change to a SwapSession goes through apply(). The controller decides
WHEN events happen; this module decides WHAT each event does to the value.

Files that USE this module:
- xswap.application.controller (sequences events during submit/reset/reverse)
- tests.test_session (unit tests)

Files that this module USES:
- xswap.domain.models (SwapSession, SessionState, ErrorKind, Quote)
- xswap.application.reversal (reverse)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Union

from xswap.application.reversal import reverse
from xswap.domain.currencies import DEFAULT_FROM_CURRENCY, DEFAULT_TO_CURRENCY
from xswap.domain.models import ErrorKind, Quote, SessionState, SwapSession

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectFrom:
    currency: str


@dataclass(frozen=True)
class SelectTo:
    currency: str


@dataclass(frozen=True)
class EnterAmount:
    text: str


@dataclass(frozen=True)
class BeginValidation:
    pass


@dataclass(frozen=True)
class ValidationFailed:
    error: ErrorKind


@dataclass(frozen=True)
class BeginSubmission:
    pass


@dataclass(frozen=True)
class QuoteReady:
    """Resolution of an in-flight submit started under `epoch`."""
    quote: Quote
    epoch: int


@dataclass(frozen=True)
class SubmissionFailed:
    """Failure of an in-flight submit started under `epoch`."""
    epoch: int


@dataclass(frozen=True)
class Reverse:
    pass


@dataclass(frozen=True)
class Reset:
    from_currency: str = DEFAULT_FROM_CURRENCY
    to_currency: str = DEFAULT_TO_CURRENCY


Event = Union[
    SelectFrom,
    SelectTo,
    EnterAmount,
    BeginValidation,
    ValidationFailed,
    BeginSubmission,
    QuoteReady,
    SubmissionFailed,
    Reverse,
    Reset,
]


def _is_live_resolution(session: SwapSession, epoch: int) -> bool:
    """A submit resolution only lands on the session generation that started it."""
    return session.state is SessionState.SUBMITTING and session.epoch == epoch


def apply(session: SwapSession, event: Event) -> SwapSession:
    """
    Apply one event to a session.

    Args:
        session: Current session value
        event: Event to apply

    Returns:
        The next session value. Events that are not allowed in the current
        state (a new validation while submitting, a stale resolution)
        return the session unchanged.

    Raises:
        TypeError: If the event type is unknown
    """
    if isinstance(event, SelectFrom):
        return replace(session, from_currency=event.currency)

    if isinstance(event, SelectTo):
        return replace(session, to_currency=event.currency)

    if isinstance(event, EnterAmount):
        return replace(session, from_amount_text=event.text)

    if isinstance(event, BeginValidation):
        if session.is_submitting:
            return session
        return replace(session, state=SessionState.VALIDATING, error=None, succeeded=False)

    if isinstance(event, ValidationFailed):
        return replace(
            session,
            state=SessionState.FAILED,
            error=event.error,
            succeeded=False,
            to_amount_text="",
        )

    if isinstance(event, BeginSubmission):
        return replace(session, state=SessionState.SUBMITTING, error=None, succeeded=False)

    if isinstance(event, QuoteReady):
        if not _is_live_resolution(session, event.epoch):
            log.info("Dropping stale quote from epoch %d (session epoch %d)", event.epoch, session.epoch)
            return session
        return replace(
            session,
            state=SessionState.SUCCESS,
            to_amount_text=event.quote.to_amount,
            error=None,
            succeeded=True,
        )

    if isinstance(event, SubmissionFailed):
        if not _is_live_resolution(session, event.epoch):
            log.info("Dropping stale failure from epoch %d (session epoch %d)", event.epoch, session.epoch)
            return session
        return replace(
            session,
            state=SessionState.FAILED,
            error=ErrorKind.SUBMISSION_FAILED,
            succeeded=False,
        )

    if isinstance(event, Reverse):
        reversed_session = reverse(session)
        if session.is_submitting:
            # The pending quote was for the old direction
            return replace(reversed_session, state=SessionState.IDLE, epoch=session.epoch + 1)
        return reversed_session

    if isinstance(event, Reset):
        return SwapSession.initial(
            from_currency=event.from_currency,
            to_currency=event.to_currency,
            epoch=session.epoch + 1,
        )

    raise TypeError(f"Unknown session event: {event!r}")
