"""
POST /payment: Initiate an MVola merchant payment.

The caller's body is a MVola merchant-pay request (camelCase). The response
mirrors the provider: same status code, body {"status": ..., "data": ...}.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from mvola_wrapper.config import Settings
from mvola_wrapper.dependencies import get_provider, get_settings
from mvola_wrapper.engine.payment_flow import process_payment
from mvola_wrapper.providers.base import MobileMoneyProvider

router = APIRouter(tags=["payments"])


@router.post("/payment")
async def create_payment(
    request: Request,
    provider: MobileMoneyProvider = Depends(get_provider),
    config: Settings = Depends(get_settings),
):
    """
    Authenticate, then forward the payment.

    A failed token exchange answers 401 without contacting the merchant-pay
    endpoint. Malformed bodies are not validated up front and end as 500.
    """
    raw_body = await request.body()
    result = await process_payment(
        provider,
        raw_body,
        clear_correlation_fields=config.clear_correlation_fields,
    )
    return JSONResponse(status_code=result.status, content=result.as_dict())
