"""
Submission Controller - Swap Session Orchestration

This module owns the single live SwapSession of one user interaction and
orchestrates the asynchronous submit:

    IDLE -> VALIDATING -> FAILED
                       -> SUBMITTING -> SUCCESS | FAILED

The only suspension point is the simulated latency inside submit(). While
suspended the session is latched in SUBMITTING and further submits are
rejected. reset() and reverse() stay available and abandon the in-flight
submit by bumping the session epoch, so its late resolution is dropped.

Files that USE this module:
- xswap.app (builds a controller for a session)
- tests.test_controller (unit tests)

Files that this module USES:
- xswap.application.validation (validate)
- xswap.application.quote (compute_quote)
- xswap.application.session (apply and event types)
- xswap.application.scheduler (Scheduler protocol)
- xswap.domain.* (models and catalog)
"""
from __future__ import annotations

import logging
from typing import Optional

from xswap.application.quote import compute_quote
from xswap.application.scheduler import AsyncioScheduler, Scheduler
from xswap.application.session import (
    BeginSubmission,
    BeginValidation,
    EnterAmount,
    Event,
    QuoteReady,
    Reset,
    Reverse,
    SelectFrom,
    SelectTo,
    SubmissionFailed,
    ValidationFailed,
    apply,
)
from xswap.application.validation import validate
from xswap.domain.catalog import PriceCatalog
from xswap.domain.currencies import DEFAULT_FROM_CURRENCY, DEFAULT_TO_CURRENCY
from xswap.domain.errors import DomainError
from xswap.domain.models import ConversionRequest, SwapSession

log = logging.getLogger(__name__)

DEFAULT_SUBMIT_LATENCY_MS = 2000


class SubmissionController:
    """Owns one SwapSession and drives its submit/reset/reverse transitions."""

    def __init__(
        self,
        catalog: PriceCatalog,
        scheduler: Optional[Scheduler] = None,
        latency_ms: int = DEFAULT_SUBMIT_LATENCY_MS,
        default_from_currency: str = DEFAULT_FROM_CURRENCY,
        default_to_currency: str = DEFAULT_TO_CURRENCY,
    ):
        """
        Initialize the controller with a fresh default session.

        Args:
            catalog: Price snapshot for the whole session
            scheduler: Latency source (defaults to AsyncioScheduler)
            latency_ms: Simulated submit latency in milliseconds
            default_from_currency: Source currency restored by reset()
            default_to_currency: Target currency restored by reset()
        """
        self.catalog = catalog
        self.scheduler = scheduler or AsyncioScheduler()
        self.latency_ms = latency_ms
        self._defaults = Reset(default_from_currency, default_to_currency)
        self._session = SwapSession.initial(default_from_currency, default_to_currency)

    @property
    def session(self) -> SwapSession:
        """Current session value, for rendering."""
        return self._session

    def _dispatch(self, event: Event) -> SwapSession:
        previous = self._session
        self._session = apply(previous, event)
        if self._session.state is not previous.state:
            log.debug(
                "Session %s -> %s on %s",
                previous.state.value, self._session.state.value, type(event).__name__,
            )
        return self._session

    # --- Caller edits ---

    def select_from_currency(self, currency: str) -> SwapSession:
        return self._dispatch(SelectFrom(currency))

    def select_to_currency(self, currency: str) -> SwapSession:
        return self._dispatch(SelectTo(currency))

    def set_amount(self, text: str) -> SwapSession:
        return self._dispatch(EnterAmount(text))

    # --- Operations ---

    async def submit(self, request: Optional[ConversionRequest] = None) -> bool:
        """
        Validate and, if valid, quote a conversion request.

        Args:
            request: Request to submit; defaults to the current session fields

        Returns:
            False if the call was rejected because a submit is in flight,
            True otherwise (whatever the outcome recorded on the session)
        """
        if self._session.is_submitting:
            log.info("Submit rejected: a submission is already in flight")
            return False

        if request is None:
            request = self._session.to_request()

        self._dispatch(BeginValidation())
        error = validate(request, self.catalog)
        if error is not None:
            log.info("Swap validation failed: %s", error.name)
            self._dispatch(ValidationFailed(error))
            return True

        self._dispatch(BeginSubmission())
        epoch = self._session.epoch
        log.info(
            "Submitting swap %s %s -> %s (epoch %d)",
            request.from_amount_text, request.from_currency, request.to_currency, epoch,
        )

        await self.scheduler.sleep(self.latency_ms)

        try:
            quote = compute_quote(request, self.catalog)
        except (DomainError, ArithmeticError, LookupError, ValueError):
            log.exception("Swap failed while computing quote for %s", request)
            self._dispatch(SubmissionFailed(epoch))
            return True

        self._dispatch(QuoteReady(quote, epoch))
        if self._session.succeeded and self._session.epoch == epoch:
            log.info("Swap completed: %s %s", quote.to_amount, request.to_currency)
        return True

    def reset(self) -> SwapSession:
        """Return the session to its defaults. Valid from any state."""
        log.debug("Resetting session from %s", self._session.state.value)
        return self._dispatch(self._defaults)

    def reverse(self) -> SwapSession:
        """Swap the direction, mirroring displayed amounts without requoting."""
        return self._dispatch(Reverse())
