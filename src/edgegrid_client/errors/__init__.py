"""Errors raised while sending signed requests."""

from edgegrid_client.errors.exceptions import (
    InvalidRedirectError,
    RedirectLoopExceededError,
    RequestError,
    RequestNotSignedError,
    TransportError,
)

__all__ = [
    "InvalidRedirectError",
    "RedirectLoopExceededError",
    "RequestError",
    "RequestNotSignedError",
    "TransportError",
]
