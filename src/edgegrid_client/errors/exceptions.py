"""Structured exceptions for request dispatch."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from edgegrid_client.request import SignedRequest


class RequestError(Exception):
    """Base exception for errors raised while sending a signed request."""

    def __init__(self, message: str, request: "SignedRequest | None" = None):
        super().__init__(message)
        self.request = request


class TransportError(RequestError):
    """The transport failed before a response was received."""

    def __init__(self, message: str, request: "SignedRequest | None" = None, cause: Exception | None = None):
        super().__init__(message, request=request)
        self.cause = cause


class RedirectLoopExceededError(RequestError):
    """A redirect chain went past the configured hop limit."""

    def __init__(
        self,
        message: str,
        max_redirects: int,
        history: list[str] | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.max_redirects = max_redirects
        self.history = history if history is not None else []


class RequestNotSignedError(RequestError):
    """``send()`` was called before ``auth()``."""

    pass


class InvalidRedirectError(RequestError):
    """A redirect response carried a ``Location`` that cannot be parsed."""

    def __init__(self, message: str, location: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.location = location
