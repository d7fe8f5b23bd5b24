"""Tests for structured logging configuration."""

import logging

import structlog

from cli.logging_config import PREVIEW_CHARS, _redact_sensitive, setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode(self):
        """Console mode uses dev renderer."""
        setup_logging(json_mode=False, level="DEBUG")
        structlog.get_logger().info("test_message", key="value")  # no crash

    def test_json_mode(self):
        setup_logging(json_mode=True, level="DEBUG")
        logging.getLogger("test_json").info("json test")

    def test_level_filtering(self):
        """Log level filters lower messages."""
        setup_logging(json_mode=False, level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_single_handler(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_processor_chain_includes_redaction(self):
        setup_logging(json_mode=True, level="DEBUG")
        assert _redact_sensitive in structlog.get_config()["processors"]

    def test_default_level_is_info(self):
        """Default level param is INFO."""
        setup_logging()
        assert logging.getLogger().level == logging.INFO


class TestRedaction:
    """Journal text and e-mail addresses never reach the log verbatim."""

    def test_email_masked(self):
        event = _redact_sensitive(None, None, {"event": "user_loaded", "email": "alice@example.com"})
        assert event["email"] == "REDACTED@email"

    def test_content_truncated(self):
        content = "Dear diary, " + "x" * 100
        event = _redact_sensitive(None, None, {"event": "entry_saved", "content": content})

        assert event["content"].startswith(content[:PREVIEW_CHARS])
        assert event["content"].endswith(f"...[{len(content)} chars]")

    def test_short_content_kept(self):
        event = _redact_sensitive(None, None, {"event": "entry_saved", "content": "Short."})
        assert event["content"] == "Short."

    def test_other_fields_not_truncated(self):
        title = "t" * 100
        event = _redact_sensitive(None, None, {"event": "x", "title": title, "count": 3})
        assert event["title"] == title
        assert event["count"] == 3
