"""
MVola Wrapper: HTTP adapter for the MVola merchant-pay API.

Lets a client application authenticate with MVola, initiate merchant
payments, and deliver asynchronous payment-result callbacks, without
holding any state between requests.

Start the server:
    uvicorn mvola_wrapper.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from mvola_wrapper.api.auth import router as auth_router
from mvola_wrapper.api.health import router as health_router
from mvola_wrapper.api.payments import router as payments_router
from mvola_wrapper.api.webhooks import router as webhooks_router
from mvola_wrapper.config import settings
from mvola_wrapper.errors import MvolaError, error_body, status_for

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("mvola_wrapper.api")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

ROUTING_MESSAGES = {
    404: "Not Found",
    405: "Method not allowed",
}


app = FastAPI(
    title="MVola Wrapper",
    description=(
        "Stateless adapter in front of the MVola mobile-money API: token exchange, "
        "merchant payment initiation, and payment-result callbacks."
    ),
    version="1.0.0",
    redirect_slashes=False,
)


@app.middleware("http")
async def cors_and_guard(request: Request, call_next):
    """Answer preflights, trap unhandled errors, and add CORS headers to every response."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception("Handler error on %s %s: %s", request.method, request.url.path, e)
        response = JSONResponse(status_code=status_for(e), content=error_body(e))

    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(MvolaError)
async def mvola_error_handler(request: Request, exc: MvolaError):
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


@app.exception_handler(StarletteHTTPException)
async def routing_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        ROUTING_MESSAGES.get(exc.status_code, str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


app.include_router(health_router)
app.include_router(auth_router)
app.include_router(payments_router)
app.include_router(webhooks_router)
