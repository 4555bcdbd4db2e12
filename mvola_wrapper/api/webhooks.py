"""POST /webhook: Receive MVola payment-result callbacks."""

import json

from fastapi import APIRouter, Request

from mvola_wrapper.audit.logger import log_event

router = APIRouter(tags=["webhooks"])


@router.post("/webhook")
async def receive_webhook(request: Request):
    # TODO: verify the callback origin before forwarding events to downstream systems.
    event = json.loads(await request.body())
    log_event("webhook_received", {"event": event})
    return {"received": True}
