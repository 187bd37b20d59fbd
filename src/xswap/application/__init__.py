"""
Application Layer - Use Cases and Services

This package contains the engine's services: validation, quoting, session
transitions, reversal and the submission controller.
No direct I/O dependencies.
"""

from xswap.application.controller import SubmissionController
from xswap.application.quote import compute_quote, exchange_rate, format_fixed, usd_value
from xswap.application.reversal import reverse
from xswap.application.scheduler import AsyncioScheduler, Scheduler
from xswap.application.session import apply
from xswap.application.validation import validate

__all__ = [
    "SubmissionController",
    "compute_quote",
    "exchange_rate",
    "format_fixed",
    "usd_value",
    "reverse",
    "AsyncioScheduler",
    "Scheduler",
    "apply",
    "validate",
]
