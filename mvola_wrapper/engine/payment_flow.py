"""
Payment flow: authenticate, prepare the request, submit it.

Ordering guarantee: the merchant-pay call is never attempted unless
authentication succeeded in the same request. The caller's body is decoded
only after the token exchange, so an authentication failure is reported
even when the body is malformed.
"""

import json
import logging

from mvola_wrapper.models.payment import PaymentRequest
from mvola_wrapper.providers.base import MobileMoneyProvider, PaymentResult

logger = logging.getLogger("mvola_wrapper.flow")


def prepare_request(raw_body: bytes, clear_correlation_fields: bool = True) -> PaymentRequest:
    """
    Decode the caller's body into a PaymentRequest.

    Raises:
        json.JSONDecodeError: Body is not JSON.
        pydantic.ValidationError: Body does not describe a merchant payment.
    """
    request = PaymentRequest.model_validate(json.loads(raw_body))
    if clear_correlation_fields:
        request.clear_correlation_fields()
    return request


async def process_payment(
    provider: MobileMoneyProvider,
    raw_body: bytes,
    clear_correlation_fields: bool = True,
) -> PaymentResult:
    """
    Run one merchant payment end to end.

    Raises:
        AuthenticationError: Token exchange failed; nothing was sent to the
            merchant-pay endpoint.
    """
    token = await provider.authenticate()
    request = prepare_request(raw_body, clear_correlation_fields)
    result = await provider.initiate_payment(request, token.access_token)

    logger.info(
        "Payment via %s: %s %s from %s -> status %d",
        provider.name,
        request.amount,
        request.currency,
        request.payer_msisdn,
        result.status,
    )
    return result
