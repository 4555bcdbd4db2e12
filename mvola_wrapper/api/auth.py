"""POST /auth: Exchange the configured credentials for an MVola access token."""

from fastapi import APIRouter, Depends

from mvola_wrapper.dependencies import get_provider
from mvola_wrapper.providers.base import MobileMoneyProvider

router = APIRouter(tags=["auth"])


@router.post("/auth")
async def authenticate(provider: MobileMoneyProvider = Depends(get_provider)):
    """
    Fetch a fresh token. Failures become 401 {"error": "Authentication failed"};
    the provider's reason is only logged.
    """
    token = await provider.authenticate()
    return {
        "success": True,
        "token": token.access_token,
        "expires_in": token.expires_in,
    }
