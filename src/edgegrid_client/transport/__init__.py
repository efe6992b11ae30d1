"""Transport layer for sending signed requests.

The client only needs something with ``send(signed_request) -> httpx.Response``.
:class:`HttpxTransport` is the default; tests substitute
:class:`~edgegrid_client.testing.RecordingTransport` or wrap
``httpx.MockTransport`` in an ``httpx.Client``.

Modules:
    base: Transport protocol
    httpx_transport: httpx-backed transport

Example:
    ```python
    import httpx

    from edgegrid_client.transport import HttpxTransport

    transport = HttpxTransport(client=httpx.Client(timeout=10))
    ```
"""

from edgegrid_client.transport.base import Transport
from edgegrid_client.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "Transport"]
