from typing import List

import pytest
from fastapi.testclient import TestClient

from evaleads.core.config import EmailConfig, Settings, SmsConfig
from evaleads.core.dependencies import get_email_sender, get_rate_limiter
from evaleads.external.email import OutboundEmail, SendError, SendResult
from evaleads.main import create_app
from evaleads.services.rate_limiter import FixedWindowRateLimiter

AUTH_TOKEN = "test-auth-token"


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSender:
    """EmailSender double that records messages and can be told to fail"""

    def __init__(self):
        self.sent: List[OutboundEmail] = []
        self.fail_on_call = None
        self.raise_on_call = None
        self.raise_exc = None

    async def send(self, message: OutboundEmail) -> SendResult:
        call = len(self.sent) + 1
        if self.raise_on_call == call:
            raise self.raise_exc
        self.sent.append(message)
        if self.fail_on_call == call:
            return SendResult(error=SendError(name="validation_error", message="bad address", status_code=422))
        return SendResult(id=f"msg-{call}")


def make_settings(**overrides) -> Settings:
    data = {
        "email": EmailConfig(
            api_key="re_test",
            from_email="hello@evahomecleaning.com",
            leads_to="leads@evahomecleaning.com",
        ),
        "sms": SmsConfig(auth_token=AUTH_TOKEN),
    }
    data.update(overrides)
    return Settings(**data)


@pytest.fixture
def valid_lead():
    return {
        "name": "Jo Lee",
        "email": "jo@example.com",
        "phone": "4155551234",
        "city_or_zip": "94107",
        "home_type": "condo",
        "frequency": "weekly",
        "condition": "normal",
        "consent": True,
    }


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return FixedWindowRateLimiter(window_seconds=15 * 60, max_requests=5, clock=clock)


@pytest.fixture
def build_client(sender, limiter):
    """Factory for a TestClient over an app created with the given settings"""

    def _build(**overrides) -> TestClient:
        app = create_app(make_settings(**overrides))
        app.dependency_overrides[get_email_sender] = lambda: sender
        app.dependency_overrides[get_rate_limiter] = lambda: limiter
        return TestClient(app)

    return _build


@pytest.fixture
def client(build_client):
    return build_client()
