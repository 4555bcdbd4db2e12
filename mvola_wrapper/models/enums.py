"""Enumerations shared across the wrapper."""

from enum import Enum


class ProviderMode(str, Enum):
    """Which provider implementation backs the HTTP surface."""

    MVOLA = "mvola"
    MOCK = "mock"


class ErrorKind(str, Enum):
    """Categories used to map failures onto HTTP status codes."""

    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    UNHANDLED = "unhandled"
