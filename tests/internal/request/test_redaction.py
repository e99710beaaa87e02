"""Tests for parameter redaction."""

from workfront_sdk._internal.request.redaction import REDACTED_VALUE, redact_params


class TestRedactParams:
    """Tests for redact_params()."""

    def test_redacts_workfront_credentials(self):
        """Should redact apiKey and sessionID regardless of case."""
        result = redact_params({"apiKey": "k", "sessionID": "s", "name": "x"})
        assert result == {"apiKey": REDACTED_VALUE, "sessionID": REDACTED_VALUE, "name": "x"}

    def test_redacts_common_secret_keys(self):
        result = redact_params({"password": "p", "Token": "t", "fields": "ID"})
        assert result["password"] == REDACTED_VALUE
        assert result["Token"] == REDACTED_VALUE
        assert result["fields"] == "ID"

    def test_nested_values(self):
        result = redact_params({"updates": {"apiKey": "k"}, "list": [{"password": "p"}]})
        assert result["updates"]["apiKey"] == REDACTED_VALUE
        assert result["list"][0]["password"] == REDACTED_VALUE

    def test_original_not_mutated(self):
        params = {"apiKey": "k"}
        redact_params(params)
        assert params == {"apiKey": "k"}
