"""Tests for public exceptions."""

import pytest

from workfront_sdk.exceptions import (
    ResponseParseError,
    WorkfrontAPIError,
    WorkfrontConfigError,
    WorkfrontError,
    WorkfrontValidationError,
)


class TestWorkfrontError:
    """Tests for base WorkfrontError."""

    def test_is_exception(self):
        """WorkfrontError should be an Exception."""
        assert issubclass(WorkfrontError, Exception)

    def test_can_be_raised(self):
        """WorkfrontError should be raisable with message."""
        with pytest.raises(WorkfrontError) as exc_info:
            raise WorkfrontError("test error")
        assert str(exc_info.value) == "test error"


class TestWorkfrontAPIError:
    """Tests for WorkfrontAPIError."""

    def test_inherits_from_workfront_error(self):
        """WorkfrontAPIError should inherit from WorkfrontError."""
        assert issubclass(WorkfrontAPIError, WorkfrontError)

    def test_with_string_error(self):
        """Should keep a string error verbatim."""
        error = WorkfrontAPIError("not found")
        assert str(error) == "not found"
        assert error.error == "not found"
        assert error.envelope == {"error": "not found"}
        assert error.status_code is None

    def test_with_structured_error(self):
        """Should keep a structured error and the full envelope."""
        envelope = {"error": {"class": "NotFound", "message": "nope"}}
        error = WorkfrontAPIError(envelope["error"], envelope=envelope, status_code=404)
        assert error.error == {"class": "NotFound", "message": "nope"}
        assert error.envelope is envelope
        assert error.status_code == 404

    def test_can_be_caught_as_workfront_error(self):
        """Should be catchable as WorkfrontError."""
        with pytest.raises(WorkfrontError):
            raise WorkfrontAPIError("API error", status_code=500)


class TestResponseParseError:
    """Tests for ResponseParseError."""

    def test_carries_raw_body(self):
        """Should expose the raw body as both str() and .body."""
        error = ResponseParseError("not-json")
        assert str(error) == "not-json"
        assert error.body == "not-json"

    def test_inherits_from_workfront_error(self):
        """ResponseParseError should inherit from WorkfrontError."""
        assert issubclass(ResponseParseError, WorkfrontError)


class TestWorkfrontConfigError:
    """Tests for WorkfrontConfigError."""

    def test_inherits_from_workfront_error(self):
        """WorkfrontConfigError should inherit from WorkfrontError."""
        assert issubclass(WorkfrontConfigError, WorkfrontError)


class TestWorkfrontValidationError:
    """Tests for WorkfrontValidationError."""

    def test_inherits_from_workfront_error(self):
        """WorkfrontValidationError should inherit from WorkfrontError."""
        assert issubclass(WorkfrontValidationError, WorkfrontError)
