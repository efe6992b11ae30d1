"""Test basic package functionality."""

import edgegrid_client


def test_version():
    """Test that package version is defined."""
    assert hasattr(edgegrid_client, "__version__")
    assert edgegrid_client.__version__ == "0.1.0"
