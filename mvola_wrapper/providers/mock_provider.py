"""
Mock MVola provider for offline development.

Answers like the MVola sandbox without any network access:
  - Authentication returns a fixed bearer token (or fails on demand)
  - Merchant payments are accepted as pending with a fresh server correlation ID
  - Optional latency to exercise the async path

Selected with MVOLA_PROVIDER_MODE=mock. Also used as a test double.
"""

import asyncio
import uuid
from typing import Any, Optional

from mvola_wrapper.errors import AuthenticationError
from mvola_wrapper.models.payment import PaymentRequest
from mvola_wrapper.providers.base import AuthToken, MobileMoneyProvider, PaymentResult

MOCK_TOKEN = "mock-access-token"


class MockMvolaProvider(MobileMoneyProvider):
    """In-memory stand-in that records the payments it is asked to make."""

    def __init__(
        self,
        token: str = MOCK_TOKEN,
        fail_auth: bool = False,
        payment_result: Optional[PaymentResult] = None,
        latency_ms: int = 0,
    ):
        self._token = token
        self._fail_auth = fail_auth
        self._payment_result = payment_result
        self._latency_ms = latency_ms
        self.auth_calls = 0
        self.payments: list[tuple[dict[str, Any], str]] = []

    @property
    def name(self) -> str:
        return "mock_mvola"

    async def _sleep(self) -> None:
        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000)

    async def authenticate(self) -> AuthToken:
        self.auth_calls += 1
        await self._sleep()
        if self._fail_auth:
            raise AuthenticationError()
        return AuthToken(
            access_token=self._token,
            scope="EXT_INT_MVOLA_SCOPE",
            token_type="Bearer",
            expires_in=3600,
        )

    async def initiate_payment(self, request: PaymentRequest, token: str) -> PaymentResult:
        self.payments.append((request.to_wire(), token))
        await self._sleep()

        if self._payment_result is not None:
            return self._payment_result
        return PaymentResult(
            status=202,
            data={
                "status": "pending",
                "serverCorrelationId": str(uuid.uuid4()),
                "notificationMethod": "callback",
            },
        )
