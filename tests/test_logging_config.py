"""
Tests for logging setup
=======================
"""

import json


class TestRedactSensitive:
    """Tests for the redaction processor."""

    def test_top_level_keys_redacted(self):
        """Should redact secret-bearing keys regardless of case or dashes."""
        from signed_request.logging_config import redact_sensitive, REDACTED

        event = redact_sensitive(None, "warning", {
            "event": "x",
            "Signature": "abc",
            "api-key": "k",
            "outcome": "expired",
        })

        assert event == {
            "event": "x",
            "Signature": REDACTED,
            "api-key": REDACTED,
            "outcome": "expired",
        }

    def test_nested_keys_redacted(self):
        """Should redact inside nested dicts."""
        from signed_request.logging_config import redact_sensitive, REDACTED

        event = redact_sensitive(None, "info", {
            "event": "x",
            "params": {"foo": "bar", "secret": "s", "inner": {"token": "t"}},
        })

        assert event["params"] == {
            "foo": "bar",
            "secret": REDACTED,
            "inner": {"token": REDACTED},
        }


class TestSetupLogging:
    """Tests for structlog configuration."""

    def test_json_output(self, capsys):
        """Should emit JSON lines with service, level and redaction."""
        import structlog
        from signed_request.logging_config import setup_logging

        setup_logging("billing-api")
        structlog.get_logger("test").warning("signing_failed", secret="hunter2")

        lines = capsys.readouterr().out.strip().splitlines()
        record = json.loads(lines[-1])

        assert record["event"] == "signing_failed"
        assert record["level"] == "warning"
        assert record["service"] == "billing-api"
        assert record["secret"] == "[REDACTED]"
        assert "timestamp" in record
        assert "hunter2" not in lines[-1]

    def test_level_filtering(self, capsys):
        """Should drop events below the configured level."""
        import structlog
        from signed_request.logging_config import setup_logging

        setup_logging("billing-api", level="WARNING")
        capsys.readouterr()
        structlog.get_logger("test").info("quiet")

        assert capsys.readouterr().out == ""

    def test_console_output(self, capsys):
        """Should render readable lines when JSON is disabled."""
        import structlog
        from signed_request.logging_config import setup_logging

        setup_logging("billing-api", json_output=False)
        structlog.get_logger("test").warning("signed_request_expired", token="abc")

        out = capsys.readouterr().out

        assert "signed_request_expired" in out
        assert "abc" not in out
