"""
Shared transport

One process-wide ``Transport`` that every endpoint function uses unless a
transport is passed explicitly.
"""

from typing import Optional

from .exceptions import (
    TransportError,
    RequestFailedError,
    HTTPStatusError,
    UnauthorizedError,
    ApiError,
)
from .settings import TransportSettings
from .transport import Transport

_shared_transport: Optional[Transport] = None


def get_transport() -> Transport:
    """Return the shared transport, building it from the environment on first use."""
    global _shared_transport
    if _shared_transport is None:
        _shared_transport = Transport(TransportSettings.from_env())
    return _shared_transport


def set_transport(transport: Transport) -> None:
    global _shared_transport
    _shared_transport = transport


def reset_transport() -> None:
    global _shared_transport
    _shared_transport = None


__all__ = [
    "Transport",
    "TransportSettings",
    "TransportError",
    "RequestFailedError",
    "HTTPStatusError",
    "UnauthorizedError",
    "ApiError",
    "get_transport",
    "set_transport",
    "reset_transport",
]
