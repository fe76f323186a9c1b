"""Unit tests for the logging configuration module.

This test module validates the structured logging configuration, context
binding, and the log events emitted by the data structures.
"""

import json
import logging

import pytest
import structlog

from src.graph.graph import Graph
from src.linear.linked_list import LinkedList
from src.log_config import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


class TestLoggingConfiguration:
    """Test cases for logging configuration."""

    def test_configure_logging_info_level(self):
        """Test logging configuration with INFO level."""
        configure_logging(level="INFO", json_logs=True)
        logger = get_logger("test")
        assert logger is not None

    def test_configure_logging_lowercase_level(self):
        """Test level names are case-insensitive."""
        configure_logging(level="debug", json_logs=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_invalid_level(self):
        """Test logging configuration with invalid level."""
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="INVALID", json_logs=True)

    def test_configure_logging_console_renderer(self):
        """Test logging configuration with console renderer."""
        configure_logging(level="INFO", json_logs=False)
        logger = get_logger("test")
        assert logger is not None

    def test_get_logger_without_name(self):
        """Test getting a logger without a name."""
        configure_logging(level="INFO", json_logs=True)
        assert get_logger() is not None

    def test_configured_wrapper_class(self):
        """Test structlog is configured with the stdlib bound logger."""
        configure_logging(level="INFO", json_logs=True)
        assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger


class TestContextBinding:
    """Test cases for context binding functionality."""

    def setup_method(self):
        """Set up test environment before each test."""
        configure_logging(level="INFO", json_logs=True)
        clear_context()

    def teardown_method(self):
        """Clean up after each test."""
        clear_context()

    def test_bind_context(self, caplog):
        """Test bound context is included in log entries."""
        caplog.set_level(logging.INFO)
        logger = get_logger("test")

        bind_context(config_file="demo.yaml")
        logger.info("run_started")

        assert len(caplog.records) == 1
        assert "demo.yaml" in caplog.records[0].getMessage()

    def test_unbind_context(self, caplog):
        """Test unbinding removes a specific key."""
        caplog.set_level(logging.INFO)
        logger = get_logger("test")

        bind_context(config_file="demo.yaml", start="A")
        logger.info("with_context")
        unbind_context("config_file")
        logger.info("without_config_file")

        assert len(caplog.records) == 2
        assert "demo.yaml" in caplog.records[0].getMessage()
        assert "demo.yaml" not in caplog.records[1].getMessage()

    def test_clear_context(self, caplog):
        """Test clearing all context variables."""
        caplog.set_level(logging.INFO)
        logger = get_logger("test")

        bind_context(config_file="demo.yaml")
        clear_context()
        logger.info("without_context")

        assert "demo.yaml" not in caplog.records[0].getMessage()


class TestStructuredLogging:
    """Test cases for structured log output from the structures."""

    def setup_method(self):
        """Set up test environment before each test."""
        configure_logging(level="DEBUG", json_logs=True)
        clear_context()

    def test_json_output_format(self, caplog):
        """Test that log messages are JSON documents with event and level."""
        caplog.set_level(logging.INFO)
        get_logger("test").info("test_event", key1="value1", key2=42)

        payload = json.loads(caplog.records[0].getMessage())

        assert payload["event"] == "test_event"
        assert payload["level"] == "info"
        assert payload["key2"] == 42

    def test_graph_operations_logged(self, caplog):
        """Test graph mutations emit debug events."""
        caplog.set_level(logging.DEBUG)
        graph = Graph()
        graph.add_node("A")
        graph.add_node("B")
        graph.add_edge("A", "B")

        events = [json.loads(record.getMessage())["event"] for record in caplog.records]

        assert events.count("node_added") == 2
        assert "edge_added" in events

    def test_traversal_logged(self, caplog):
        """Test traversals log their strategy and order."""
        caplog.set_level(logging.DEBUG)
        graph = Graph()
        graph.add_node("A")
        graph.traverse_depth_first_iterative("A")

        payloads = [json.loads(record.getMessage()) for record in caplog.records]
        completed = [p for p in payloads if p["event"] == "traversal_completed"]

        assert completed[0]["strategy"] == "depth_first_iterative"
        assert completed[0]["order"] == ["A"]

    def test_underflow_logged_as_warning(self, caplog):
        """Test list underflow is logged before raising."""
        caplog.set_level(logging.WARNING)

        with pytest.raises(LookupError):
            LinkedList().delete_first()

        assert caplog.records[0].levelno == logging.WARNING
        assert "delete_from_empty_list" in caplog.records[0].getMessage()
