"""
Domain Models - Pure Business Objects

This module contains domain models representing the swap engine's concepts:
- Conversion requests and quotes
- The closed set of user-facing error kinds
- The swap session value and its lifecycle states

Files that USE this module:
- xswap.application.* (all services use domain models)
- xswap.adapters.formatting (renders sessions and quotes)
- tests.* (tests use domain models for test data)

Files that this module USES:
- xswap.domain.currencies (default currency pair)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Closed enumerations for states and error kinds
from typing import Optional  # Type hints for optional values

from xswap.domain.currencies import (
    DEFAULT_FROM_AMOUNT,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
)


class ErrorKind(Enum):
    """
    User-facing failures of a swap submission.

    Each kind carries exactly one message that is surfaced verbatim.
    """
    INVALID_AMOUNT = "Please enter a valid amount greater than 0"
    MISSING_CURRENCIES = "Please select both source and target currencies"
    SAME_CURRENCIES = "Source and target currencies must be different"
    PRICE_UNAVAILABLE = "Price data not available for selected currencies"
    SUBMISSION_FAILED = "Swap failed. Please try again."

    @property
    def message(self) -> str:
        return self.value


class SessionState(Enum):
    """Lifecycle states of a swap session."""
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionRequest:
    """
    A single conversion request as entered by the user.

    Attributes:
        from_currency: Source currency code (may be empty if unset)
        to_currency: Target currency code (may be empty if unset)
        from_amount_text: Raw amount text, not yet parsed
    """
    from_currency: str
    to_currency: str
    from_amount_text: str


@dataclass(frozen=True)
class Quote:
    """
    Computed conversion for one request.

    Attributes:
        rate: Units of target currency per unit of source currency
        to_amount: Converted amount as a decimal string with 6 fractional digits
    """
    rate: float
    to_amount: str


@dataclass(frozen=True)
class SwapSession:
    """
    The record of one user's in-progress conversion interaction.

    Attributes:
        state: Current lifecycle state
        from_currency: Selected source currency
        to_currency: Selected target currency
        from_amount_text: Raw amount typed by the user
        to_amount_text: Quoted (or mirrored) target amount, empty otherwise
        error: Error kind when state is FAILED, None otherwise
        succeeded: True only when state is SUCCESS
        epoch: Generation counter; bumped whenever an in-flight submit
               must be abandoned
    """
    state: SessionState = SessionState.IDLE
    from_currency: str = DEFAULT_FROM_CURRENCY
    to_currency: str = DEFAULT_TO_CURRENCY
    from_amount_text: str = DEFAULT_FROM_AMOUNT
    to_amount_text: str = ""
    error: Optional[ErrorKind] = None
    succeeded: bool = False
    epoch: int = 0

    @classmethod
    def initial(
        cls,
        from_currency: str = DEFAULT_FROM_CURRENCY,
        to_currency: str = DEFAULT_TO_CURRENCY,
        epoch: int = 0,
    ) -> SwapSession:
        """Create a session holding the default pair and an empty amount."""
        return cls(from_currency=from_currency, to_currency=to_currency, epoch=epoch)

    def to_request(self) -> ConversionRequest:
        """Build a conversion request from the current selections."""
        return ConversionRequest(
            from_currency=self.from_currency,
            to_currency=self.to_currency,
            from_amount_text=self.from_amount_text,
        )

    @property
    def is_submitting(self) -> bool:
        return self.state is SessionState.SUBMITTING

    @property
    def error_message(self) -> str:
        """Message for the recorded error, or an empty string."""
        return self.error.message if self.error else ""
