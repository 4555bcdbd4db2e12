"""
Liveness endpoints.

/    : Plain-text banner listing the endpoints.
/test: JSON self-check reporting the configured base URL and whether credentials are set.

Both answer any method.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from mvola_wrapper.config import Settings
from mvola_wrapper.dependencies import get_settings

router = APIRouter(tags=["health"])

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"]

BANNER = (
    "MVola API Wrapper is running!\n"
    "\n"
    "Endpoints:\n"
    "- GET /test\n"
    "- POST /auth\n"
    "- POST /payment\n"
    "- POST /webhook"
)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.api_route("/", methods=ANY_METHOD, response_class=PlainTextResponse)
async def banner():
    return BANNER


@router.api_route("/test", methods=ANY_METHOD)
async def self_check(config: Settings = Depends(get_settings)):
    return {
        "message": "API is working!",
        "timestamp": _utc_timestamp(),
        "config": {
            "baseUrl": config.base_url,
            "hasCredentials": config.has_credentials,
        },
    }
