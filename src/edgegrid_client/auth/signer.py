"""EdgeGrid ``EG1-HMAC-SHA256`` request signing.

The signature covers the method, scheme, host, path and query, the headers
named in ``headers_to_sign``, a hash of POST bodies and the auth data itself:

    signing_key = base64(HMAC-SHA256(client_secret, timestamp))
    signature   = base64(HMAC-SHA256(signing_key, data_to_sign))

    Authorization: EG1-HMAC-SHA256 client_token=...;access_token=...;
                   timestamp=...;nonce=...;signature=...

Any callable with the signature of :func:`sign_request` can replace it on the
client, which is how tests pin the signing step.
"""

import base64
import hashlib
import hmac
import logging
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from urllib.parse import urlsplit

from edgegrid_client.constants import DEFAULT_MAX_BODY, HEADER_AUTHORIZATION, SIGNING_ALGORITHM, TIMESTAMP_FORMAT
from edgegrid_client.request import RequestSpec, SignedRequest

logger = logging.getLogger(__name__)


def eg_timestamp(now: datetime | None = None) -> str:
    """Format ``now`` (default: current UTC time) as an EdgeGrid timestamp."""
    return (now or datetime.now(UTC)).strftime(TIMESTAMP_FORMAT)


def base64_hmac_sha256(key: str | bytes, data: str | bytes) -> str:
    if isinstance(key, str):
        key = key.encode("utf-8")
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(hmac.new(key, data, hashlib.sha256).digest()).decode("ascii")


def base64_sha256(data: bytes) -> str:
    return base64.b64encode(hashlib.sha256(data).digest()).decode("ascii")


def canonicalize_headers(headers: Mapping[str, str], headers_to_sign: tuple[str, ...] | list[str]) -> str:
    """Return ``name:value`` pairs for the signed headers, tab-separated.

    Names are lower-cased, values trimmed with inner whitespace collapsed.
    Headers that are not present are skipped.
    """
    lowered = {key.lower(): value for key, value in headers.items()}
    canonical = []
    for name in headers_to_sign:
        value = lowered.get(name.lower())
        if value is None:
            continue
        canonical.append(f"{name.lower()}:{' '.join(str(value).split())}")
    return "\t".join(canonical)


def content_hash(method: str, body: str | bytes, max_body: int = DEFAULT_MAX_BODY) -> str:
    """Hash the first ``max_body`` bytes of a POST body; empty otherwise."""
    if method.upper() != "POST" or not body:
        return ""
    data = body.encode("utf-8") if isinstance(body, str) else body
    if len(data) > max_body:
        logger.debug(f"Signing only the first {max_body} of {len(data)} body bytes")
        data = data[:max_body]
    return base64_sha256(data)


def make_auth_data(client_token: str, access_token: str, timestamp: str, nonce: str) -> str:
    return f"{SIGNING_ALGORITHM} client_token={client_token};access_token={access_token};timestamp={timestamp};nonce={nonce};"


def make_data_to_sign(spec: RequestSpec, url: str, body: str | bytes, auth_data: str, max_body: int) -> str:
    parsed = urlsplit(url)
    relative_url = parsed.path or "/"
    if parsed.query:
        relative_url += "?" + parsed.query

    return "\t".join(
        [
            spec.method.upper(),
            parsed.scheme,
            parsed.netloc,
            relative_url,
            canonicalize_headers(spec.headers, spec.headers_to_sign),
            content_hash(spec.method, body, max_body),
            auth_data,
        ]
    )


def sign_request(
    spec: RequestSpec,
    client_token: str,
    client_secret: str,
    access_token: str,
    host: str,
    *,
    max_body: int = DEFAULT_MAX_BODY,
    timestamp: str | None = None,
    nonce: str | None = None,
) -> SignedRequest:
    """Compute the ``Authorization`` header for ``spec``.

    Args:
        spec: Request with defaults applied (see ``RequestSpec.with_defaults``).
        client_token: Client token.
        client_secret: Client secret, the HMAC key.
        access_token: Access token.
        host: Host with scheme, used when ``spec.url`` is empty.
        max_body: Maximum number of body bytes covered by the content hash.
        timestamp: Fixed timestamp, for reproducible signatures.
        nonce: Fixed nonce, for reproducible signatures.

    Returns:
        A SignedRequest with the absolute url and Authorization header.
    """
    timestamp = timestamp or eg_timestamp()
    nonce = nonce or str(uuid.uuid4())
    url = spec.url or host + spec.path
    body = spec.body if isinstance(spec.body, (str, bytes)) else str(spec.body)

    auth_data = make_auth_data(client_token, access_token, timestamp, nonce)
    signing_key = base64_hmac_sha256(client_secret, timestamp)
    signature = base64_hmac_sha256(signing_key, make_data_to_sign(spec, url, body, auth_data, max_body))

    headers = {k: v for k, v in spec.headers.items() if k.lower() != HEADER_AUTHORIZATION.lower()}
    headers[HEADER_AUTHORIZATION] = f"{auth_data}signature={signature}"

    logger.debug(f"Signed {spec.method} {url} (nonce {nonce})")
    return SignedRequest(spec=spec, url=url, method=spec.method.upper(), headers=headers, body=body)
