"""
Abstract mobile-money provider interface.

The HTTP surface only needs two operations from a provider: exchange the
consumer credentials for an access token, and submit a merchant payment
with that token. MvolaProvider talks to the real API; MockMvolaProvider
stands in for it offline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from mvola_wrapper.errors import MvolaError
from mvola_wrapper.models.payment import PaymentRequest


@dataclass
class AuthToken:
    """Token returned by the client-credentials exchange. Lives for one request."""

    access_token: str
    scope: str = ""
    token_type: str = ""
    expires_in: int = 0

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "AuthToken":
        return cls(
            access_token=payload["access_token"],
            scope=payload.get("scope", ""),
            token_type=payload.get("token_type", ""),
            expires_in=payload.get("expires_in", 0),
        )


@dataclass
class PaymentResult:
    """Provider status code plus the decoded response body, passed through as-is."""

    status: int
    data: Any

    @classmethod
    def from_error(cls, error: MvolaError) -> "PaymentResult":
        return cls(status=error.status_code, data={"error": error.message})

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data}


class MobileMoneyProvider(ABC):
    """Abstract base class for mobile-money providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier (e.g. 'mvola')."""
        ...

    @abstractmethod
    async def authenticate(self) -> AuthToken:
        """
        Obtain a fresh access token.

        Raises:
            AuthenticationError: On any non-success status, transport
                failure or undecodable body.
        """
        ...

    @abstractmethod
    async def initiate_payment(self, request: PaymentRequest, token: str) -> PaymentResult:
        """
        Submit a merchant payment.

        Provider-reported failures are returned, not raised. Transport
        failures are returned as a synthesized 500 result.
        """
        ...
