"""Pytest configuration and shared fixtures for edgegrid-client tests."""

import pytest

EDGERC = """\
[default]
client_secret = default-secret=
host = akab-default.luna.akamaiapis.net
access_token = akab-default-access
client_token = akab-default-client
max-body = 8192

[papi]
client_secret = papi-secret
host = https://akab-papi.luna.akamaiapis.net
access_token = akab-papi-access
client_token = akab-papi-client
"""


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear EdgeGrid environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("AKAMAI_", "EDGEGRID_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def edgerc(tmp_path):
    """Write a two-section .edgerc file and return its path."""
    path = tmp_path / ".edgerc"
    path.write_text(EDGERC)
    return path


@pytest.fixture
def test_env():
    """Environment mapping with credential diagnostics suppressed."""
    return {"EDGEGRID_ENV": "test"}
