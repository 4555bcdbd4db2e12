from mvola_wrapper.providers.base import AuthToken, MobileMoneyProvider, PaymentResult
from mvola_wrapper.providers.mock_provider import MockMvolaProvider
from mvola_wrapper.providers.mvola import MvolaProvider

__all__ = [
    "AuthToken",
    "MobileMoneyProvider",
    "MockMvolaProvider",
    "MvolaProvider",
    "PaymentResult",
]
