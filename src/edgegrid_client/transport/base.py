"""Transport protocol used by the EdgeGrid client."""

from typing import Protocol, runtime_checkable

import httpx

from edgegrid_client.request import SignedRequest


@runtime_checkable
class Transport(Protocol):
    """Sends one signed request and returns the raw response.

    Implementations follow redirects only when ``request.spec.follow_redirect``
    is set; otherwise the client re-signs them. Failures before a response is
    received are raised as :class:`~edgegrid_client.errors.TransportError`.
    """

    def send(self, request: SignedRequest) -> httpx.Response: ...
