from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from cupcake_shop.app_factory import create_app
from cupcake_shop.order_session import OrderSession
from cupcake_shop.order_state import OrderStateHolder
from cupcake_shop.step_flow import StepFlowController

# A Monday
TODAY = date(2026, 10, 19)


class FakeClock:
    """Callable date source that tests can move forward."""

    def __init__(self, today: date = TODAY):
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1) -> None:
        self.today += timedelta(days=days)


class RecordingShareTarget:
    """Share target that records what it was asked to share."""

    def __init__(self):
        self.shared = []

    def share(self, subject: str, body: str) -> dict:
        self.shared.append((subject, body))
        return {"status": "sent", "subject": subject, "mock": True}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def holder(clock):
    return OrderStateHolder(today=clock)


@pytest.fixture
def flow(holder):
    return StepFlowController(holder)


@pytest.fixture
def share_target():
    return RecordingShareTarget()


@pytest.fixture
def session(holder, share_target):
    return OrderSession(order_holder=holder, share_target=share_target)


@pytest.fixture
def client(session):
    """TestClient over an app serving the test session."""
    return TestClient(create_app(order_session=session))
