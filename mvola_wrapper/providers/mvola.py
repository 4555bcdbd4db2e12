"""
MVola HTTP client.

Two calls, both fresh per request and never retried:
  - POST {base_url}/token: client-credentials exchange (Basic auth, form body)
  - POST {base_url}/mvola/mm/.../merchantpay/1.0.0/: merchant payment (Bearer, JSON body)
"""

import base64
import json
import logging
import uuid
from typing import Any, Optional

import httpx

from mvola_wrapper.audit.logger import log_event
from mvola_wrapper.config import Settings
from mvola_wrapper.errors import AuthenticationError, TransportError
from mvola_wrapper.models.payment import PaymentRequest
from mvola_wrapper.providers.base import AuthToken, MobileMoneyProvider, PaymentResult

logger = logging.getLogger("mvola_wrapper.provider")


def _basic_credentials(key: str, secret: str) -> str:
    return base64.b64encode(f"{key}:{secret}".encode("utf-8")).decode("ascii")


def _masked(headers: dict[str, str]) -> dict[str, str]:
    shown = dict(headers)
    if "Authorization" in shown:
        scheme = shown["Authorization"].split(" ", 1)[0]
        shown["Authorization"] = f"{scheme} ***"
    return shown


class MvolaProvider(MobileMoneyProvider):
    """Talks to the MVola merchant API described by `settings`."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._transport = transport

    @property
    def name(self) -> str:
        return "mvola"

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"transport": self._transport}
        if self._settings.timeout_seconds is not None:
            kwargs["timeout"] = self._settings.timeout_seconds
        return httpx.AsyncClient(**kwargs)

    async def authenticate(self) -> AuthToken:
        s = self._settings
        headers = {
            "Authorization": f"Basic {_basic_credentials(s.consumer_key, s.consumer_secret)}",
            "Content-Type": "application/x-www-form-urlencoded",
            "Cache-Control": "no-cache",
        }
        form = {"grant_type": "client_credentials", "scope": s.token_scope}

        try:
            async with self._client() as client:
                response = await client.post(s.token_url, data=form, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Auth error: %s", e)
            raise AuthenticationError() from e

        if not response.is_success:
            logger.error("Auth failed: %d %s", response.status_code, response.text)
            raise AuthenticationError()

        try:
            return AuthToken.from_payload(response.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.error("Auth failed: undecodable token response (%s): %s", e, response.text)
            raise AuthenticationError() from e

    def _payment_headers(self, request: PaymentRequest, token: str) -> dict[str, str]:
        s = self._settings
        return {
            "Authorization": f"Bearer {token}",
            "Version": s.api_version,
            "X-CorrelationID": str(uuid.uuid4()),
            "UserLanguage": s.user_language,
            "UserAccountIdentifier": f"msisdn;{request.payer_msisdn}",
            "partnerName": s.partner_name,
            "Content-Type": "application/json",
            "X-Callback-URL": s.callback_url,
            "Cache-Control": "no-cache",
        }

    async def initiate_payment(self, request: PaymentRequest, token: str) -> PaymentResult:
        # Raises IndexError on an empty debitParty; left to the caller.
        headers = self._payment_headers(request, token)
        body = request.to_wire()
        url = self._settings.merchant_pay_url

        log_event("payment_request", {
            "url": url,
            "headers": _masked(headers),
            "body": body,
        })

        try:
            async with self._client() as client:
                response = await client.post(url, content=json.dumps(body), headers=headers)
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error("Payment initiation error: %s", e)
            return PaymentResult.from_error(TransportError(str(e)))

        log_event("payment_response", {
            "status": response.status_code,
            "body": data,
        })
        return PaymentResult(status=response.status_code, data=data)
