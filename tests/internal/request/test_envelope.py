"""Tests for response envelope parsing."""

import pytest

from workfront_sdk._internal.request.envelope import parse_envelope, unwrap_envelope
from workfront_sdk.exceptions import ResponseParseError, WorkfrontAPIError


class TestParseEnvelope:
    """Tests for parse_envelope()."""

    def test_valid_object(self):
        assert parse_envelope('{"data": {"id": 1}}') == {"data": {"id": 1}}

    def test_not_json_keeps_raw_text(self):
        """Should raise with the literal body."""
        with pytest.raises(ResponseParseError) as exc_info:
            parse_envelope("not-json")
        assert exc_info.value.body == "not-json"
        assert str(exc_info.value) == "not-json"

    def test_empty_body(self):
        with pytest.raises(ResponseParseError) as exc_info:
            parse_envelope("")
        assert exc_info.value.body == ""

    def test_non_object_json(self):
        """A JSON array is not an envelope."""
        with pytest.raises(ResponseParseError) as exc_info:
            parse_envelope("[1, 2]")
        assert exc_info.value.body == "[1, 2]"


class TestUnwrapEnvelope:
    """Tests for unwrap_envelope()."""

    def test_returns_data(self):
        assert unwrap_envelope({"data": {"id": 1}}) == {"id": 1}

    def test_missing_data_is_none(self):
        assert unwrap_envelope({}) is None

    def test_null_error_is_success(self):
        assert unwrap_envelope({"data": [1], "error": None}) == [1]

    def test_string_error(self):
        envelope = {"error": "not found"}
        with pytest.raises(WorkfrontAPIError) as exc_info:
            unwrap_envelope(envelope, status_code=404)
        assert exc_info.value.error == "not found"
        assert exc_info.value.envelope is envelope
        assert exc_info.value.status_code == 404

    def test_structured_error_not_normalized(self):
        error = {"class": "com.attask.common.NotFoundException", "message": "gone"}
        with pytest.raises(WorkfrontAPIError) as exc_info:
            unwrap_envelope({"error": error, "data": None})
        assert exc_info.value.error == error
