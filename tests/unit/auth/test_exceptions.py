"""Tests for credential resolution exceptions."""

import pytest

from edgegrid_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    InsufficientCredentialsError,
    InvalidSectionDataError,
    InvalidSectionError,
)


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_can_be_raised(self):
        """Test that CredentialError can be raised."""
        with pytest.raises(CredentialError):
            raise CredentialError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        try:
            raise CredentialError("Custom error message")
        except CredentialError as e:
            assert str(e) == "Custom error message"


class TestInsufficientCredentialsError:
    """Test InsufficientCredentialsError exception."""

    def test_is_credential_error(self):
        """Test that InsufficientCredentialsError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise InsufficientCredentialsError()

    def test_default_message(self):
        """Test the default message matches the historical wording."""
        assert str(InsufficientCredentialsError()) == "Insufficient Akamai credentials"

    def test_missing_attribute(self):
        """Test that the missing field names are kept."""
        error = InsufficientCredentialsError(missing=["client_secret"])
        assert error.missing == ["client_secret"]

    def test_missing_optional(self):
        """Test that missing defaults to an empty list."""
        assert InsufficientCredentialsError().missing == []


class TestSectionErrors:
    """Test InvalidSectionError and InvalidSectionDataError."""

    @pytest.mark.parametrize("exc_class", [InvalidSectionError, InvalidSectionDataError])
    def test_is_credential_error(self, exc_class):
        with pytest.raises(CredentialError):
            raise exc_class("bad section")

    @pytest.mark.parametrize("exc_class", [InvalidSectionError, InvalidSectionDataError])
    def test_section_and_path_attributes(self, exc_class):
        error = exc_class("bad section", section="papi", path="/home/me/.edgerc")
        assert error.section == "papi"
        assert error.path == "/home/me/.edgerc"

    def test_section_errors_are_distinct(self):
        """Test that a missing section is not reported as bad data."""
        assert not issubclass(InvalidSectionError, InvalidSectionDataError)
        assert not issubclass(InvalidSectionDataError, InvalidSectionError)


class TestCredentialFileError:
    """Test CredentialFileError exception."""

    def test_is_credential_error(self):
        """Test that CredentialFileError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialFileError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        try:
            raise CredentialFileError("File not found: /path/to/file")
        except CredentialFileError as e:
            assert str(e) == "File not found: /path/to/file"
