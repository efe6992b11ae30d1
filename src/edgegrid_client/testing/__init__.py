"""Testing utilities for EdgeGrid clients.

Example:
    ```python
    from edgegrid_client import EdgeGrid
    from edgegrid_client.testing import RecordingTransport, make_response

    transport = RecordingTransport([make_response(302, location="/b"), make_response(200, text="ok")])
    client = EdgeGrid.from_strings("ct", "cs", "at", "host", transport=transport)
    client.auth({"path": "/a"}).send(callback)
    assert [r.spec.path for r in transport.requests] == ["/a", "/b"]
    ```
"""

from collections.abc import Iterable

import httpx

from edgegrid_client.errors.exceptions import TransportError
from edgegrid_client.request import SignedRequest


def make_response(
    status_code: int = 200,
    *,
    text: str = "",
    location: str | None = None,
    headers: dict[str, str] | None = None,
    url: str = "https://example.luna.akamaiapis.net/",
) -> httpx.Response:
    """Build an ``httpx.Response`` with an attached request."""
    response_headers = dict(headers or {})
    if location is not None:
        response_headers["Location"] = location
    return httpx.Response(
        status_code,
        headers=response_headers,
        text=text,
        request=httpx.Request("GET", url),
    )


class RecordingTransport:
    """Scripted transport that records every request it is given.

    Each ``send`` pops the next scripted item: a response is returned, an
    exception is raised (wrapped in TransportError unless it already is one).
    """

    def __init__(self, responses: Iterable[httpx.Response | Exception] = ()):
        self._responses = list(responses)
        self.requests: list[SignedRequest] = []
        self.closed = False

    def send(self, request: SignedRequest) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")

        item = self._responses.pop(0)
        if isinstance(item, TransportError):
            raise item
        if isinstance(item, Exception):
            raise TransportError(str(item), request=request, cause=item) from item
        return item

    def close(self) -> None:
        self.closed = True


__all__ = ["RecordingTransport", "make_response"]
