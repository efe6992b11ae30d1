"""Custom exceptions for credential resolution.

Every failure to assemble a usable credential set derives from
:class:`CredentialError`, so callers can catch the whole family at once.

Example:
    ```python
    from edgegrid_client.auth.exceptions import InvalidSectionError

    try:
        credentials = load_credentials("~/.edgerc", "papi")
    except InvalidSectionError as e:
        print(f"No [{e.section}] in {e.path}")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class InsufficientCredentialsError(CredentialError):
    """Raised when the four required credentials cannot all be assembled.

    Attributes:
        missing: Names of the fields that were empty or absent.

    Example:
        ```python
        try:
            client = EdgeGrid.from_strings("token", "", "access", "host")
        except InsufficientCredentialsError as e:
            print(f"Missing: {', '.join(e.missing)}")
        ```
    """

    def __init__(self, message: str = "Insufficient Akamai credentials", missing: list[str] | None = None):
        """Initialize InsufficientCredentialsError.

        Args:
            message: Error message.
            missing: Optional list of missing field names.
        """
        super().__init__(message)
        self.missing = missing if missing is not None else []


class InvalidSectionError(CredentialError):
    """Raised when the requested section is absent from a credentials file."""

    def __init__(self, message: str, section: str | None = None, path: str | None = None):
        super().__init__(message)
        self.section = section
        self.path = path


class InvalidSectionDataError(CredentialError):
    """Raised when a section was found but its entries are unusable."""

    def __init__(self, message: str, section: str | None = None, path: str | None = None):
        super().__init__(message)
        self.section = section
        self.path = path


class CredentialFileError(CredentialError):
    """Raised when a credentials file cannot be read.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    pass
