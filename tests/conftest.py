"""
Shared Test Fixtures - Price Catalogs and a Controllable Scheduler

Files that USE this module:
- pytest (fixtures are injected into all tests)

Files that this module USES:
- xswap.domain.catalog (PriceCatalog for test data)
- xswap.application.controller (SubmissionController under test)
"""
import asyncio  # Events used to hold and release the fake submit delay

import pytest  # Testing framework for writing and running tests

from xswap.application.controller import SubmissionController  # Controller under test
from xswap.domain.catalog import PriceCatalog  # Price snapshot for test data


class FakeScheduler:
    """
    Scheduler that never waits on real time.

    In automatic mode sleep() returns immediately. In manual mode sleep()
    blocks until release() is called, so tests can observe the session
    while a submit is in flight.
    """

    def __init__(self, manual: bool = False):
        self.manual = manual
        self.delays = []
        self.suspended = asyncio.Event()
        self._gate = asyncio.Event()

    async def sleep(self, delay_ms: int) -> None:
        self.delays.append(delay_ms)
        if self.manual:
            self.suspended.set()
            await self._gate.wait()

    def release(self) -> None:
        self._gate.set()


@pytest.fixture
def catalog():
    return PriceCatalog({"ETH": 2000, "USDC": 1, "ATOM": 7.5, "STATOM": 8.25})


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def manual_scheduler():
    return FakeScheduler(manual=True)


@pytest.fixture
def controller(catalog, scheduler):
    return SubmissionController(catalog=catalog, scheduler=scheduler)


@pytest.fixture
def held_controller(catalog, manual_scheduler):
    """Controller whose submits stay in flight until the scheduler is released."""
    return SubmissionController(catalog=catalog, scheduler=manual_scheduler)
