"""EdgeGrid client: sign, send and re-sign on redirect.

Example:
    ```python
    from edgegrid_client import EdgeGrid

    def on_done(body, response=None):
        if response is None:
            raise body  # transport failure
        print(response.status_code, body)

    client = EdgeGrid.from_edgerc("~/.edgerc", section="papi")
    client.auth({"path": "/papi/v1/groups"}).send(on_done)
    ```

One client holds one pending signed request. Calls on the same instance must
not overlap; use one instance per logical call when in doubt.
"""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import httpx

from edgegrid_client.auth.credentials import (
    CredentialResolver,
    CredentialSource,
    FromEnvironment,
    FromFile,
    FromStrings,
)
from edgegrid_client.auth.environment import EnvironmentProvider
from edgegrid_client.auth.exceptions import InsufficientCredentialsError
from edgegrid_client.auth.models import Credentials
from edgegrid_client.auth.signer import sign_request
from edgegrid_client.constants import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_SECTION,
    REDIRECT_STATUS_CODES,
    REQUIRED_FIELDS,
)
from edgegrid_client.errors.exceptions import (
    InvalidRedirectError,
    RedirectLoopExceededError,
    RequestNotSignedError,
    TransportError,
)
from edgegrid_client.request import RequestSpec, SignedRequest
from edgegrid_client.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]
Signer = Callable[..., SignedRequest]


def enable_debug_logging() -> None:
    """Turn on DEBUG output for this package and for httpx."""
    logging.getLogger("edgegrid_client").setLevel(logging.DEBUG)
    logging.getLogger("httpx").setLevel(logging.DEBUG)


def redirect_path(location: str) -> str:
    """Return the path and query of a ``Location`` value, dropping scheme and host."""
    url = httpx.URL(location)
    return url.raw_path.decode("ascii") or "/"


class EdgeGrid:
    """Signs requests with EdgeGrid credentials and dispatches them.

    Prefer the named constructors, which resolve credentials first:

    - :meth:`from_strings` - explicit values, all four required
    - :meth:`from_edgerc` - an ``.edgerc`` section, overridable by environment
    - :meth:`from_environment` - ``AKAMAI_*`` variables only

    Args:
        credentials: Resolved credentials, or None if none were found. Signing
            without credentials raises InsufficientCredentialsError.
        transport: Object with ``send(signed_request) -> httpx.Response``.
            Defaults to :class:`HttpxTransport`.
        signer: Signing function, :func:`sign_request` by default.
        debug: Log requests and enable DEBUG logging for the package.
        max_redirects: Redirect hops allowed per ``send()``. None removes the
            limit.
    """

    def __init__(
        self,
        credentials: Credentials | None,
        *,
        transport: Transport | None = None,
        signer: Signer = sign_request,
        debug: bool = False,
        max_redirects: int | None = DEFAULT_MAX_REDIRECTS,
    ) -> None:
        self.credentials = credentials
        self.debug = debug
        self.transport = transport if transport is not None else HttpxTransport(debug=debug)
        self.signer = signer
        self.max_redirects = max_redirects
        self.request: SignedRequest | None = None

        if debug:
            enable_debug_logging()

    @classmethod
    def from_source(
        cls,
        source: CredentialSource,
        *,
        environment: EnvironmentProvider | Mapping[str, str] | None = None,
        **kwargs,
    ) -> "EdgeGrid":
        """Resolve ``source`` and build a client with the result."""
        credentials = CredentialResolver(environment).resolve(source)
        return cls(credentials, **kwargs)

    @classmethod
    def from_strings(
        cls,
        client_token: str | None,
        client_secret: str | None,
        access_token: str | None,
        host: str | None,
        **kwargs,
    ) -> "EdgeGrid":
        """Build a client from explicit credentials.

        Raises:
            InsufficientCredentialsError: If any value is empty.
        """
        return cls.from_source(FromStrings(client_token, client_secret, access_token, host), **kwargs)

    @classmethod
    def from_edgerc(
        cls,
        path: str | Path | None = None,
        section: str = DEFAULT_SECTION,
        *,
        compat: bool = False,
        **kwargs,
    ) -> "EdgeGrid":
        """Build a client from an ``.edgerc`` section.

        ``AKAMAI_*`` variables for the same section override the file when
        they provide a host. With no path, only the environment is used.
        """
        return cls.from_source(FromFile(path=path, section=section or DEFAULT_SECTION, compat=compat), **kwargs)

    @classmethod
    def from_environment(cls, section: str = DEFAULT_SECTION, **kwargs) -> "EdgeGrid":
        """Build a client from ``AKAMAI_*`` environment variables."""
        return cls.from_source(FromEnvironment(section=section or DEFAULT_SECTION), **kwargs)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def auth(self, request: RequestSpec | Mapping[str, Any]) -> "EdgeGrid":
        """Apply defaults to ``request``, sign it and keep it as pending.

        Args:
            request: A RequestSpec, or a mapping with at least ``path`` and
                optionally ``method``, ``headers``, ``body``, ``url``,
                ``headers_to_sign`` and ``follow_redirect``.

        Returns:
            This client, so ``send`` can be chained.

        Raises:
            InsufficientCredentialsError: If no credentials were resolved.
        """
        if self.credentials is None:
            raise InsufficientCredentialsError("No Akamai credentials resolved", missing=list(REQUIRED_FIELDS))

        spec = request if isinstance(request, RequestSpec) else RequestSpec.from_mapping(request)
        spec = spec.with_defaults(self.credentials.host)

        credentials = self.credentials
        self.request = self.signer(
            spec,
            credentials.client_token,
            credentials.client_secret,
            credentials.access_token,
            credentials.host,
            max_body=credentials.max_body,
        )
        return self

    def send(self, callback: Callback) -> "EdgeGrid":
        """Send the pending request and report the outcome to ``callback``.

        ``callback(body, response)`` receives the first non-redirect response,
        body first. ``callback(error)`` receives a TransportError, a
        RedirectLoopExceededError or an InvalidRedirectError. Redirects are
        re-signed and resent in between without calling ``callback``, unless
        the request set ``follow_redirect``, in which case the transport
        follows them and whatever it returns is terminal.

        Raises:
            RequestNotSignedError: If ``auth`` has not been called.
        """
        if self.request is None:
            raise RequestNotSignedError("auth() must be called before send()")

        history: list[str] = []

        while True:
            try:
                response = self._dispatch(self.request)
            except TransportError as e:
                callback(e)
                return self

            if self.request.spec.follow_redirect or not self._is_redirect(response):
                callback(response.text, response)
                return self

            history.append(self.request.url)
            if self.max_redirects is not None and len(history) > self.max_redirects:
                logger.warning(f"Gave up after {self.max_redirects} redirects from {history[0]}")
                callback(
                    RedirectLoopExceededError(
                        f"Exceeded {self.max_redirects} redirects",
                        max_redirects=self.max_redirects,
                        history=history,
                        request=self.request,
                    )
                )
                return self

            try:
                self._handle_redirect(response)
            except httpx.InvalidURL as e:
                location = response.headers["location"]
                logger.warning(f"Unusable redirect Location {location!r} from {self.request.url}: {e}")
                callback(
                    InvalidRedirectError(
                        f"Invalid redirect location {location!r}: {e}",
                        location=location,
                        request=self.request,
                    )
                )
                return self

    def _dispatch(self, request: SignedRequest) -> httpx.Response:
        try:
            return self.transport.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"Request {request.method} {request.url} failed: {e}", request=request, cause=e) from e

    def _is_redirect(self, response: httpx.Response) -> bool:
        return response.status_code in REDIRECT_STATUS_CODES and "location" in response.headers

    def _handle_redirect(self, response: httpx.Response) -> None:
        """Re-sign the pending request against the response's Location path."""
        path = redirect_path(response.headers["location"])
        # The old signature covered the old path
        response.headers.pop("authorization", None)

        logger.debug(f"Redirect {response.status_code} from {self.request.url} to {path}")
        self.auth(self.request.spec.redirected_to(path))
