"""httpx-backed transport for signed EdgeGrid requests."""

import logging

import httpx

from edgegrid_client.constants import DEFAULT_TIMEOUT
from edgegrid_client.errors.exceptions import TransportError
from edgegrid_client.request import SignedRequest

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Send signed requests with an ``httpx.Client``.

    Redirects are only followed when the request's ``follow_redirect`` is
    set; otherwise the client re-signs them. Timeouts are the only limit
    applied, and they come from the httpx client.

    Args:
        client: An existing ``httpx.Client``. The transport does not close
            clients it did not create.
        timeout: Timeout in seconds for the client created when ``client``
            is None.
        debug: Log each request line and response status at INFO.

    Example:
        ```python
        with HttpxTransport(timeout=10) as transport:
            response = transport.send(signed_request)
        ```
    """

    def __init__(self, client: httpx.Client | None = None, timeout: float = DEFAULT_TIMEOUT, debug: bool = False):
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self.debug = debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def build_request(self, request: SignedRequest) -> httpx.Request:
        return self._client.build_request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.content or None,
        )

    def send(self, request: SignedRequest) -> httpx.Response:
        """Send ``request`` and return the response with its body read.

        Raises:
            TransportError: On connection errors, timeouts and other
                ``httpx.HTTPError`` failures.
        """
        http_request = self.build_request(request)
        if self.debug:
            logger.info(f"{request.method} {request.url}")

        try:
            response = self._client.send(http_request, follow_redirects=request.spec.follow_redirect)
            response.read()
        except httpx.HTTPError as e:
            logger.warning(f"Request {request.method} {request.url} failed with {e}")
            raise TransportError(f"Request {request.method} {request.url} failed: {e}", request=request, cause=e) from e

        if self.debug:
            logger.info(f"{request.method} {request.url} -> {response.status_code}")
        return response
