"""Shared test fixtures."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from mvola_wrapper.config import Settings
from mvola_wrapper.dependencies import get_provider, get_settings
from mvola_wrapper.main import app
from mvola_wrapper.providers.mvola import MvolaProvider

TOKEN_PAYLOAD = {
    "access_token": "abc123",
    "scope": "EXT_INT_MVOLA_SCOPE",
    "token_type": "Bearer",
    "expires_in": 3600,
}


@pytest.fixture
def settings() -> Settings:
    """Settings with credentials, independent of the environment."""
    return Settings(
        _env_file=None,
        base_url="https://mvola.test",
        consumer_key="key",
        consumer_secret="secret",
    )


@pytest.fixture
def payment_body() -> dict:
    return {
        "amount": "1000",
        "currency": "Ar",
        "descriptionText": "test",
        "debitParty": [{"key": "msisdn", "value": "0340000000"}],
        "creditParty": [{"key": "msisdn", "value": "0350000000"}],
        "metadata": [],
    }


class FakeMvola:
    """
    httpx transport handler that plays the MVola API and records every call.

    Configure `token_status` / `token_body` and `pay_status` / `pay_body`
    per test; `calls` holds the httpx.Request objects received.
    """

    def __init__(self):
        self.token_status = 200
        self.token_body: object = TOKEN_PAYLOAD
        self.pay_status = 200
        self.pay_body: object = {"transactionReference": "TX1"}
        self.calls: list[httpx.Request] = []

    def _respond(self, status: int, body: object) -> httpx.Response:
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if request.url.path == "/token":
            return self._respond(self.token_status, self.token_body)
        return self._respond(self.pay_status, self.pay_body)

    @property
    def token_calls(self) -> list[httpx.Request]:
        return [c for c in self.calls if c.url.path == "/token"]

    @property
    def payment_calls(self) -> list[httpx.Request]:
        return [c for c in self.calls if c.url.path != "/token"]

    def sent_payment(self, index: int = 0) -> dict:
        return json.loads(self.payment_calls[index].content)


@pytest.fixture
def fake_mvola() -> FakeMvola:
    return FakeMvola()


@pytest.fixture
def provider(settings, fake_mvola) -> MvolaProvider:
    return MvolaProvider(settings, transport=httpx.MockTransport(fake_mvola))


@pytest.fixture
def client(settings, provider):
    """TestClient wired to the fake MVola API."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()
