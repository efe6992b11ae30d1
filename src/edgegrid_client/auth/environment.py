"""Environment lookup for credential resolution.

Credential resolution never reads ``os.environ`` directly. It goes through an
:class:`EnvironmentProvider`, so tests can hand in a fixed mapping instead of
mutating process state:

    ```python
    resolver = CredentialResolver(environment={"AKAMAI_HOST": "akab-xxx.luna.akamaiapis.net"})
    ```

Any ``Mapping[str, str]`` satisfies the protocol. :class:`ProcessEnvironment`
is the default and layers an optional ``.env`` file under the real process
environment.
"""

import logging
import os
from collections.abc import Mapping
from threading import Lock
from typing import Protocol, runtime_checkable

from dotenv import dotenv_values, find_dotenv

from edgegrid_client.constants import TEST_MODE_VALUE, TEST_MODE_VAR

logger = logging.getLogger(__name__)


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Anything that can look up a variable by name."""

    def get(self, name: str, default: str | None = None) -> str | None: ...


class ProcessEnvironment:
    """Process environment with an optional ``.env`` fallback.

    Values set in ``os.environ`` win over values from the ``.env`` file.
    The ``.env`` file is read at most once, and ``os.environ`` is never
    modified.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the provider.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches upward
                from the working directory for one.
            load_dotenv: Whether to consult a .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv
        self._dotenv: dict[str, str] = {}

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                values = dotenv_values(dotenv_path=self._dotenv_path or find_dotenv(usecwd=True))
                self._dotenv = {k: v for k, v in values.items() if v is not None}
                logger.debug(f"Loaded {len(self._dotenv)} values from .env file")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
                # Continue without .env
            self._dotenv_loaded = True

    def get(self, name: str, default: str | None = None) -> str | None:
        if name in os.environ:
            return os.environ[name]
        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()
            return self._dotenv.get(name, default)
        return default


def is_test_mode(environment: EnvironmentProvider | Mapping[str, str]) -> bool:
    """Return True when credential diagnostics should be suppressed."""
    return environment.get(TEST_MODE_VAR) == TEST_MODE_VALUE
