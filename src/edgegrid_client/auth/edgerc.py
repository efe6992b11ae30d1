"""Reader for sectioned ``.edgerc`` credentials files.

An ``.edgerc`` file is plain text made of ``[section]`` markers, each followed
by ``key = value`` lines:

    ```ini
    [default]
    client_secret = abcdEfgh=
    host = akab-xxxxxxxx.luna.akamaiapis.net
    access_token = akab-access-token
    client_token = akab-client-token
    max-body = 131072
    ```

Keys use ``-`` or ``_`` as word separators (``max-body`` becomes
``max_body``). Values are split off at the first ``=`` only, so secrets that
end in ``=`` padding survive intact.

Two windowing modes exist. The default reads a section until the next marker
or end of file. ``compat=True`` reproduces the historical behavior of taking
exactly the five lines following the marker, whatever they contain.
"""

import logging
import os
import re
from pathlib import Path

from edgegrid_client.auth.exceptions import CredentialFileError, InvalidSectionDataError, InvalidSectionError
from edgegrid_client.auth.models import Credentials, normalize_host
from edgegrid_client.constants import DEFAULT_SECTION

logger = logging.getLogger(__name__)

SECTION_MARKER = re.compile(r"^\s*\[(.*)\]\s*$")
COMPAT_WINDOW = 5
COMMENT_PREFIXES = ("#", ";")


def get_section(lines: list[str], section: str, *, compat: bool = False) -> list[str] | None:
    """Return the raw entry lines of ``section``, or None if it is absent.

    When the same section appears more than once the last occurrence wins.

    Args:
        lines: File content split into lines.
        section: Section name, without brackets.
        compat: Take a fixed window of five lines after the marker instead of
            reading up to the next marker.
    """
    found = None

    for index, line in enumerate(lines):
        match = SECTION_MARKER.match(line)
        if not match or match.group(1) != section:
            continue

        if compat:
            found = lines[index + 1 : index + 1 + COMPAT_WINDOW]
            continue

        found = []
        for entry in lines[index + 1 :]:
            if SECTION_MARKER.match(entry):
                break
            found.append(entry)

    return found


def parse_entries(lines: list[str], *, compat: bool = False, section: str | None = None, path: str | None = None) -> dict[str, str]:
    """Turn raw ``key=value`` lines into a flat mapping.

    Raises:
        InvalidSectionDataError: A line has no ``=`` (default mode only).
    """
    result: dict[str, str] = {}

    for line in lines:
        stripped = line.strip()
        if not compat and (not stripped or stripped.startswith(COMMENT_PREFIXES)):
            continue

        raw_key, sep, value = line.partition("=")
        if not sep:
            if not compat:
                raise InvalidSectionDataError(
                    f"Malformed line in section [{section}] of {path}: {stripped!r}",
                    section=section,
                    path=path,
                )
            # A line without '=' lands under an empty key
            raw_key, value = "", line

        result[raw_key.replace("-", "_").strip()] = value.strip()

    return result


def read_edgerc(path: str | Path, section: str | None = None, *, compat: bool = False) -> dict[str, str]:
    """Read one section of an ``.edgerc`` file into a flat mapping.

    The returned mapping's ``host`` is normalized to carry ``https://``.

    Args:
        path: Path to the file. Supports ``~`` and ``$VAR`` expansion.
        section: Section name. Defaults to ``"default"``.
        compat: Use the fixed five-line section window.

    Returns:
        Mapping of normalized keys to trimmed values.

    Raises:
        CredentialFileError: If the file cannot be read.
        InvalidSectionError: If the section is not in the file or has no lines.
        InvalidSectionDataError: If the section has no usable host or a
            malformed line.
    """
    section = section or DEFAULT_SECTION
    path_obj = Path(os.path.expanduser(os.path.expandvars(str(path))))

    try:
        lines = path_obj.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        raise CredentialFileError(f"Credential file not found: {path_obj}") from None
    except PermissionError:
        raise CredentialFileError(f"Permission denied reading credential file: {path_obj}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialFileError(f"Error reading credential file {path_obj}: {e}") from e

    entries = get_section(lines, section, compat=compat)
    if not entries:
        raise InvalidSectionError(
            f"An error occurred parsing {path_obj}: section [{section}] not found or empty",
            section=section,
            path=str(path_obj),
        )

    config = parse_entries(entries, compat=compat, section=section, path=str(path_obj))
    if not config.get("host"):
        raise InvalidSectionDataError(
            f"An error occurred parsing {path_obj}: section [{section}] has no host",
            section=section,
            path=str(path_obj),
        )

    config["host"] = normalize_host(config["host"])
    logger.debug(f"Read section [{section}] from {path_obj} ({len(config)} keys)")
    return config


def load_credentials(path: str | Path, section: str | None = None, *, compat: bool = False) -> Credentials:
    """Read a section and build a :class:`Credentials` from it.

    Raises:
        InvalidSectionDataError: If ``max_body`` is not a positive integer.
        InsufficientCredentialsError: If a required key is missing.
    """
    config = read_edgerc(path, section, compat=compat)
    try:
        return Credentials.from_mapping(config)
    except ValueError as e:
        raise InvalidSectionDataError(
            f"Invalid max_body in section [{section or DEFAULT_SECTION}]: {e}",
            section=section or DEFAULT_SECTION,
            path=str(path),
        ) from e
