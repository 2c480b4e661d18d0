"""Tests for structured logging helpers."""

import json
import logging

from mealbasket.logging_config import (
    ContextLogger,
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    batch_id_ctx,
    clear_context,
    current_context,
    get_logger,
    request_id_ctx,
    set_context,
)


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="mealbasket.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLoggingContext:
    """Tests for context variables."""

    def test_context_manager_sets_and_resets(self):
        """Test that values are visible inside the block only."""
        with LoggingContext(request_id="req-1", batch_id="plan-1"):
            assert current_context() == {"request_id": "req-1", "batch_id": "plan-1"}
        assert current_context() == {}

    def test_nested_contexts(self):
        """Test that an inner context restores the outer one."""
        with LoggingContext(batch_id="outer"):
            with LoggingContext(batch_id="inner"):
                assert batch_id_ctx.get() == "inner"
            assert batch_id_ctx.get() == "outer"

    def test_set_and_clear(self):
        """Test set_context and clear_context."""
        set_context(request_id="req-2")
        assert request_id_ctx.get() == "req-2"
        clear_context()
        assert current_context() == {}


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter_includes_context(self):
        """Test that JSON output carries the message and context."""
        with LoggingContext(batch_id="plan-9"):
            output = StructuredJsonFormatter().format(_record())

        data = json.loads(output)
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "mealbasket.test"
        assert data["batch_id"] == "plan-9"
        assert data["location"]["line"] == 10

    def test_contextual_formatter(self):
        """Test the human-readable format."""
        with LoggingContext(request_id="abcdef0123456789", batch_id="plan-9"):
            output = ContextualFormatter().format(_record())

        assert "mealbasket.test [req=abcdef01, batch=plan-9] | hello" in output
        assert "| INFO     |" in output


class TestContextLogger:
    """Tests for ContextLogger."""

    def test_get_logger(self):
        """Test that get_logger returns an adapter."""
        logger = get_logger("mealbasket.test")
        assert isinstance(logger, ContextLogger)
        assert logger.logger.name == "mealbasket.test"

    def test_process_adds_context(self):
        """Test that context variables are added to extra."""
        logger = get_logger("mealbasket.test")
        with LoggingContext(request_id="req-3"):
            _, kwargs = logger.process("msg", {})
        assert kwargs["extra"] == {"request_id": "req-3"}
