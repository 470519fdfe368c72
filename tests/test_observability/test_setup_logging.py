"""
Tests for setup_logging() and the layer logger factories.

structlog and stdlib logging keep global state, so every test resets both.
"""

import json
import logging
from io import StringIO

import pytest
import structlog

from gas_tracker.infrastructure.observability import (
    get_infrastructure_logger,
    get_ingestion_logger,
    get_logger,
    get_pipeline_logger,
    get_storage_logger,
    setup_logging,
)


@pytest.fixture
def clean_logging():
    original_handlers = logging.root.handlers[:]

    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()

    yield

    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()
    logging.root.handlers = original_handlers


@pytest.fixture
def captured(clean_logging):
    """JSON logging at INFO with output captured from the root logger."""
    setup_logging(level="INFO", json_logs=True, include_timestamp=True)
    logging.root.setLevel(logging.INFO)

    buffer = StringIO()
    handler = logging.StreamHandler(buffer)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.root.addHandler(handler)

    def lines() -> list[dict]:
        handler.flush()
        return [json.loads(line) for line in buffer.getvalue().splitlines() if line.strip()]

    yield lines

    logging.root.removeHandler(handler)


class TestSetupLogging:
    def test_json_mode(self, captured):
        structlog.get_logger("test").info("json_test_event", value=123)

        entry = captured()[-1]
        assert entry["event"] == "json_test_event"
        assert entry["value"] == 123
        assert entry["app"] == "gas-tracker"
        assert entry["severity"] == "INFO"
        assert "timestamp" in entry

    def test_levels(self, clean_logging):
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.root.handlers = []
            structlog.reset_defaults()

            setup_logging(level=level, json_logs=True)

            assert structlog.is_configured()
            assert logging.root.level == getattr(logging, level)

    def test_unknown_level_falls_back_to_info(self, clean_logging):
        # basicConfig is a no-op while any root handler is installed
        logging.root.handlers = []

        setup_logging(level="chatty")
        assert logging.root.level == logging.INFO

    def test_console_mode(self, clean_logging):
        setup_logging(level="INFO", json_logs=False, include_timestamp=False)
        assert structlog.is_configured()


class TestLoggerFactories:
    def test_ingestion_logger_binds_network(self, captured):
        get_ingestion_logger("jsonrpc-client", network="redstone").info("fetching_gas_price")

        entry = captured()[-1]
        assert entry["layer"] == "ingestion"
        assert entry["component"] == "jsonrpc-client"
        assert entry["network"] == "redstone"

    @pytest.mark.parametrize(
        "factory, layer",
        [
            (lambda: get_storage_logger("csv-store"), "storage"),
            (lambda: get_pipeline_logger(), "pipeline"),
            (lambda: get_infrastructure_logger("config-loader"), "infrastructure"),
        ],
    )
    def test_layer_context(self, captured, factory, layer):
        factory().info("event")

        assert captured()[-1]["layer"] == layer

    def test_extra_context(self, captured):
        get_logger(__name__, layer="pipeline", run_date="2024-05-01").info("run_started")

        entry = captured()[-1]
        assert entry["run_date"] == "2024-05-01"
        assert entry["module"] == __name__
