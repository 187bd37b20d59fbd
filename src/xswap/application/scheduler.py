"""
Scheduler - Injectable Source of Simulated Latency

Files that USE this module:
- xswap.application.controller (awaits the submit latency)
- xswap.app (wires the asyncio scheduler)
"""
from __future__ import annotations

import asyncio
from typing import Protocol


class Scheduler(Protocol):
    """Anything that can suspend the caller for a number of milliseconds."""
    async def sleep(self, delay_ms: int) -> None:
        ...


class AsyncioScheduler:
    """Real-time scheduler backed by asyncio.sleep."""

    async def sleep(self, delay_ms: int) -> None:
        await asyncio.sleep(delay_ms / 1000.0)
