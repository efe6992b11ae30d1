"""Credential resolution for EdgeGrid clients.

Credentials come from exactly one of three sources, chosen by the caller:

1. ``FromStrings`` - four explicit values, all required.
2. ``FromFile`` - a section of an ``.edgerc`` file, optionally overridden by
   ``AKAMAI_*`` environment variables for the same section.
3. ``FromEnvironment`` - ``AKAMAI_*`` environment variables only.

Environment variables follow ``AKAMAI_<SECTION>_<FIELD>`` for named sections.
The ``default`` section reads ``AKAMAI_<FIELD>``, overridden by
``AKAMAI_DEFAULT_<FIELD>`` when that is set. An environment candidate only
replaces other credentials when it supplies a host.

Example:
    ```python
    from edgegrid_client.auth import CredentialResolver, FromFile

    resolver = CredentialResolver()
    credentials = resolver.resolve(FromFile(path="~/.edgerc", section="papi"))
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - Only source information is logged (env var name, file path, etc.)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from edgegrid_client.auth.edgerc import load_credentials
from edgegrid_client.auth.environment import EnvironmentProvider, ProcessEnvironment, is_test_mode
from edgegrid_client.auth.exceptions import InsufficientCredentialsError
from edgegrid_client.auth.models import Credentials
from edgegrid_client.constants import DEFAULT_SECTION, ENV_FIELDS, ENV_PREFIX, REQUIRED_FIELDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FromStrings:
    """Explicit credential values."""

    client_token: str | None
    client_secret: str | None
    access_token: str | None
    host: str | None

    def __repr__(self) -> str:
        return f"FromStrings(host={self.host!r})"


@dataclass(frozen=True)
class FromFile:
    """An ``.edgerc`` section, with environment override.

    ``path`` may be None, in which case only the environment is consulted.
    """

    path: str | Path | None = None
    section: str = DEFAULT_SECTION
    compat: bool = False


@dataclass(frozen=True)
class FromEnvironment:
    """``AKAMAI_*`` environment variables for one section."""

    section: str = DEFAULT_SECTION


CredentialSource = FromStrings | FromFile | FromEnvironment


def env_var_name(section: str, field: str) -> str:
    """Return the section-qualified variable name, e.g. ``AKAMAI_PAPI_HOST``."""
    qualifier = section.upper().replace("-", "_")
    return f"{ENV_PREFIX}_{qualifier}_{field}"


class CredentialResolver:
    """Resolve a :class:`Credentials` value from one tagged source.

    Attributes:
        environment: Where environment variables are looked up. Any mapping
            works; defaults to the process environment plus ``.env``.

    Example:
        ```python
        resolver = CredentialResolver(environment={"AKAMAI_HOST": "akab-xxx.luna.akamaiapis.net", ...})
        credentials = resolver.resolve(FromEnvironment())
        ```
    """

    def __init__(self, environment: EnvironmentProvider | Mapping[str, str] | None = None):
        self.environment = environment if environment is not None else ProcessEnvironment()

    def _mask_credential(self, value: str | None) -> str:
        """Mask a credential value for safe logging."""
        if value is None:
            return "None"
        return "***"

    def _diagnostic(self, message: str) -> None:
        if not is_test_mode(self.environment):
            logger.error(message)

    def resolve(self, source: CredentialSource) -> Credentials | None:
        """Resolve credentials from ``source``.

        Returns:
            The resolved credentials, or None when a file/environment source
            found nothing to use.

        Raises:
            InsufficientCredentialsError: Explicit values are incomplete, or an
                environment host was found without the other fields.
            CredentialFileError: The ``.edgerc`` file cannot be read.
            InvalidSectionError: The section is not in the file.
            InvalidSectionDataError: The section has unusable data.
        """
        if isinstance(source, FromStrings):
            return self.resolve_strings(source)
        if isinstance(source, FromFile):
            return self.resolve_file(source)
        if isinstance(source, FromEnvironment):
            return self.resolve_environment(source.section)
        raise TypeError(f"Unsupported credential source: {source!r}")

    def resolve_strings(self, source: FromStrings) -> Credentials:
        """Build credentials from four explicit values."""
        values = {name: getattr(source, name) for name in REQUIRED_FIELDS}
        missing = [name for name, value in values.items() if not value]
        for name in missing:
            self._diagnostic(f"No defined {name}")
        if missing:
            raise InsufficientCredentialsError(missing=missing)

        logger.debug(f"Resolved credentials from explicit parameters for {values['host']}")
        return Credentials(**values)

    def resolve_file(self, source: FromFile) -> Credentials | None:
        """Read an ``.edgerc`` section, then let the environment override it."""
        credentials = None

        if source.path:
            credentials = load_credentials(source.path, source.section, compat=source.compat)
            logger.debug(f"Resolved credentials from [{source.section}] in {source.path} (***)")
        else:
            # Not fatal, the environment may still provide credentials
            self._diagnostic("No .edgerc path")

        from_env = self.resolve_environment(source.section)
        if from_env is not None:
            return from_env
        return credentials

    def resolve_environment(self, section: str | None = None) -> Credentials | None:
        """Resolve credentials from ``AKAMAI_*`` variables.

        Returns None when no host variable is set for the section.
        """
        section = section or DEFAULT_SECTION
        values = {field.lower(): self._lookup(section, field) for field in ENV_FIELDS}

        if not values["host"]:
            logger.debug(f"No environment credentials for section [{section}]")
            return None

        try:
            return Credentials.from_mapping({k: v for k, v in values.items() if v is not None})
        except ValueError as e:
            raise InsufficientCredentialsError(f"Invalid max_body in environment: {e}", missing=["max_body"]) from e

    def _lookup(self, section: str, field: str) -> str | None:
        if section == DEFAULT_SECTION:
            names = [f"{ENV_PREFIX}_{field}", env_var_name(DEFAULT_SECTION, field)]
        else:
            names = [env_var_name(section, field)]

        result = None
        source = None
        for name in names:
            value = self.environment.get(name)
            if value:
                result = value
                source = name

        if result is not None:
            logger.debug(f"Resolved credential from environment variable '{source}': {self._mask_credential(result)}")
        return result
