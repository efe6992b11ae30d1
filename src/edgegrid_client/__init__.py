"""EdgeGrid client core - credential resolution and request signing for Akamai APIs.

This library provides:
- Credential resolution from explicit values, ``.edgerc`` files or
  ``AKAMAI_*`` environment variables
- ``EG1-HMAC-SHA256`` request signing
- Re-signing on redirect, with a bounded hop count

Example:
    ```python
    from edgegrid_client import EdgeGrid

    client = EdgeGrid.from_edgerc("~/.edgerc", section="default")
    client.auth({"path": "/identity-management/v3/user-profile"}).send(print)
    ```
"""

from edgegrid_client.client import EdgeGrid
from edgegrid_client.request import RequestSpec, SignedRequest

__version__ = "0.1.0"

__all__ = ["EdgeGrid", "RequestSpec", "SignedRequest", "__version__"]
