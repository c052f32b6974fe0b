"""
Shared pytest fixtures for the complaint desk test suite.

Provides a deterministic clock, a fresh DispatchEngine per test, and an
in-process httpx AsyncClient bound to an app built around that engine.
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
import httpx

from dispatcher import create_app
from intake import DispatchEngine


class StepClock:
    """Returns a strictly increasing UTC time, one minute per call."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 8, 0, tzinfo=timezone.utc),
                 step: timedelta = timedelta(minutes=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def engine(clock):
    return DispatchEngine(urgency_threshold=4, clock=clock)


@pytest.fixture
def export_path(tmp_path):
    return tmp_path / "complaints_data.csv"


@pytest_asyncio.fixture
async def client(engine, export_path):
    """In-process httpx AsyncClient with the app lifespan running."""
    app = create_app(engine=engine, export_path=export_path, seed_demo=False)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
            yield c
