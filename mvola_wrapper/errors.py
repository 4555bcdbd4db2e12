"""
Error taxonomy and the single mapping from failures to HTTP responses.

Provider-reported payment failures (e.g. insufficient balance) are not
errors here: they pass through with MVola's own status and body. Only local
failures are classified:

  - AuthenticationError: token endpoint refused us, was unreachable, or
    answered with something we could not decode.
  - TransportError: the merchant-pay call never produced a usable response.
  - Validation failures: the caller's body was not JSON, did not match the
    payment schema, or had no usable debit party.
  - Anything else is unhandled.
"""

import json
from typing import Any

from pydantic import ValidationError

from mvola_wrapper.models.enums import ErrorKind

STATUS_BY_KIND = {
    ErrorKind.AUTHENTICATION: 401,
    # Malformed caller input is reported as a server error.
    ErrorKind.VALIDATION: 500,
    ErrorKind.TRANSPORT: 500,
    ErrorKind.UNHANDLED: 500,
}


class MvolaError(Exception):
    """Base exception for failures raised by this service."""

    kind = ErrorKind.UNHANDLED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class AuthenticationError(MvolaError):
    """Client-credentials exchange with MVola did not yield a token."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class TransportError(MvolaError):
    """The merchant-pay request failed before a decodable response arrived."""

    kind = ErrorKind.TRANSPORT


def classify_error(exc: BaseException) -> ErrorKind:
    if isinstance(exc, MvolaError):
        return exc.kind
    if isinstance(exc, (ValidationError, json.JSONDecodeError, IndexError, KeyError)):
        return ErrorKind.VALIDATION
    return ErrorKind.UNHANDLED


def status_for(exc: BaseException) -> int:
    return STATUS_BY_KIND[classify_error(exc)]


def error_body(exc: BaseException) -> dict[str, Any]:
    """JSON body returned to the caller for a failure."""
    if isinstance(exc, AuthenticationError):
        return {"error": exc.message}
    # NOTE: the raw exception message is exposed to the caller.
    return {"error": "Internal server error", "message": str(exc)}
