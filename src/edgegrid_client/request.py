"""Request values passed between the client, the signer and the transport.

Both types are immutable. Every transition (applying defaults, following a
redirect, signing) returns a new value, so the request that produced a
redirect is never aliased by the one that follows it.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from edgegrid_client.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_METHOD,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
)

# Accepted aliases when a request is given as a plain mapping
_MAPPING_ALIASES = {
    "headersToSign": "headers_to_sign",
    "followRedirect": "follow_redirect",
}


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    return any(key.lower() == name.lower() for key in headers)


def serialize_body(body: Any) -> str | bytes:
    """Return ``body`` as text, serializing structured values to compact JSON."""
    if body is None:
        return ""
    if isinstance(body, (str, bytes)):
        return body
    return json.dumps(body, separators=(",", ":"))


@dataclass(frozen=True)
class RequestSpec:
    """A logical HTTP request, relative to the credentials' host.

    Attributes:
        path: Path (and optional query string) below the host.
        method: HTTP method.
        headers: Request headers.
        body: Text, bytes or a JSON-serializable value.
        url: Absolute URL. Filled from host + path when None.
        headers_to_sign: Ordered header names covered by the signature.
        follow_redirect: Let the transport follow redirects itself, without
            re-signing. Off by default, since the signature covers the path.
    """

    path: str
    method: str = DEFAULT_METHOD
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = ""
    url: str | None = None
    headers_to_sign: tuple[str, ...] = ()
    follow_redirect: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "RequestSpec":
        """Build a spec from a plain mapping with at least ``path``.

        Raises:
            ValueError: If ``path`` is missing or a key is not a request field.
        """
        if not values.get("path"):
            raise ValueError("A request needs a path")
        kwargs = {_MAPPING_ALIASES.get(key, key): value for key, value in values.items()}
        unsupported = sorted(set(kwargs) - {f.name for f in fields(cls)})
        if unsupported:
            raise ValueError(f"Unsupported request field(s): {', '.join(unsupported)}")
        if "headers_to_sign" in kwargs:
            kwargs["headers_to_sign"] = tuple(kwargs["headers_to_sign"] or ())
        if "headers" in kwargs:
            kwargs["headers"] = dict(kwargs["headers"] or {})
        return cls(**kwargs)

    def with_defaults(self, host: str) -> "RequestSpec":
        """Return a copy with the url, content type and body filled in."""
        headers = dict(self.headers)
        if not _has_header(headers, HEADER_CONTENT_TYPE):
            headers[HEADER_CONTENT_TYPE] = DEFAULT_CONTENT_TYPE

        return replace(
            self,
            url=self.url or host + self.path,
            method=(self.method or DEFAULT_METHOD).upper(),
            headers=headers,
            body=serialize_body(self.body),
        )

    def redirected_to(self, path: str) -> "RequestSpec":
        """Return a copy aimed at ``path`` with the url and stale signature cleared."""
        headers = {k: v for k, v in self.headers.items() if k.lower() != HEADER_AUTHORIZATION.lower()}
        return replace(self, url=None, path=path, headers=headers)


@dataclass(frozen=True)
class SignedRequest:
    """A request ready for the wire, carrying its ``Authorization`` header."""

    spec: RequestSpec
    url: str
    method: str
    headers: Mapping[str, str]
    body: str | bytes = ""

    @property
    def authorization(self) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == HEADER_AUTHORIZATION.lower():
                return value
        return None

    @property
    def content(self) -> bytes:
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")
