"""Credential set used to sign EdgeGrid requests."""

from collections.abc import Mapping
from dataclasses import dataclass

from edgegrid_client.auth.exceptions import InsufficientCredentialsError
from edgegrid_client.constants import DEFAULT_MAX_BODY, HTTPS_PREFIX, REQUIRED_FIELDS


def normalize_host(host: str) -> str:
    """Prefix ``host`` with ``https://`` unless it already carries it.

    Idempotent: normalizing an already-normalized host returns it unchanged.
    """
    if host.startswith(HTTPS_PREFIX):
        return host
    return HTTPS_PREFIX + host


def parse_max_body(value: str | int | None) -> int:
    """Parse a ``max_body`` setting, falling back to the default when unset.

    Raises:
        ValueError: If the value is not a positive integer.
    """
    if value is None or value == "":
        return DEFAULT_MAX_BODY
    max_body = int(value)
    if max_body <= 0:
        raise ValueError(f"max_body must be positive, got {max_body}")
    return max_body


@dataclass(frozen=True)
class Credentials:
    """A fully populated EdgeGrid credential set.

    ``host`` is always stored with its ``https://`` prefix. Secrets are
    masked in ``repr`` so a Credentials value can be logged safely.
    """

    client_token: str
    client_secret: str
    access_token: str
    host: str
    max_body: int = DEFAULT_MAX_BODY

    def __post_init__(self):
        missing = [name for name in REQUIRED_FIELDS if not getattr(self, name)]
        if missing:
            raise InsufficientCredentialsError(missing=missing)
        object.__setattr__(self, "host", normalize_host(self.host))

    def __repr__(self) -> str:
        return f"Credentials(client_token='***', client_secret='***', access_token='***', host={self.host!r}, max_body={self.max_body})"

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "Credentials":
        """Build credentials from a flat mapping such as an .edgerc section.

        Raises:
            InsufficientCredentialsError: If any required field is empty.
            ValueError: If ``max_body`` is present but not a positive integer.
        """
        return cls(
            client_token=values.get("client_token", ""),
            client_secret=values.get("client_secret", ""),
            access_token=values.get("access_token", ""),
            host=values.get("host", ""),
            max_body=parse_max_body(values.get("max_body")),
        )
