"""Credential resolution and request signing.

This module provides:
- Tagged credential sources (explicit strings, ``.edgerc`` file, environment)
- An ``.edgerc`` reader
- The ``EG1-HMAC-SHA256`` signer

Example:
    ```python
    from edgegrid_client.auth import CredentialResolver, FromFile

    resolver = CredentialResolver()
    credentials = resolver.resolve(FromFile(path="~/.edgerc", section="default"))
    ```
"""

from edgegrid_client.auth.credentials import (
    CredentialResolver,
    CredentialSource,
    FromEnvironment,
    FromFile,
    FromStrings,
)
from edgegrid_client.auth.edgerc import load_credentials, read_edgerc
from edgegrid_client.auth.environment import EnvironmentProvider, ProcessEnvironment
from edgegrid_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    InsufficientCredentialsError,
    InvalidSectionDataError,
    InvalidSectionError,
)
from edgegrid_client.auth.models import Credentials, normalize_host
from edgegrid_client.auth.signer import sign_request

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialResolver",
    "CredentialSource",
    "Credentials",
    "EnvironmentProvider",
    "FromEnvironment",
    "FromFile",
    "FromStrings",
    "InsufficientCredentialsError",
    "InvalidSectionDataError",
    "InvalidSectionError",
    "ProcessEnvironment",
    "load_credentials",
    "normalize_host",
    "read_edgerc",
    "sign_request",
]
