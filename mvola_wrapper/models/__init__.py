from mvola_wrapper.models.enums import ErrorKind, ProviderMode
from mvola_wrapper.models.payment import CORRELATION_FIELDS, PaymentRequest

__all__ = [
    "CORRELATION_FIELDS",
    "ErrorKind",
    "PaymentRequest",
    "ProviderMode",
]
