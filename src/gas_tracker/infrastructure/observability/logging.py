"""
Structured logging infrastructure for gas-tracker.
Provides consistent, machine-readable logs for every collector run.

Log Structure:
    {
        "app": "gas-tracker",           # Application identifier
        "layer": "ingestion",           # Architectural layer
        "component": "alchemy-client",  # Specific component/service
        "module": "...",                # Python module (optional)
        "network": "opt-mainnet",       # Domain context
        "event": "gas_price_fetched",   # What happened
        ...
    }

Architectural Layers:
    - infrastructure: Cross-cutting (config, HTTP transport)
    - ingestion: Price acquisition (provider, direct RPC, price index)
    - pipeline: Orchestration (collector driver, per-network runs)
    - storage: CSV persistence
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict

# Define valid architectural layers
Layer = Literal["infrastructure", "ingestion", "pipeline", "storage"]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add application-wide context to every log entry.

    Keeps the collector's lines identifiable when cron output from several
    jobs ends up in the same log sink.
    """
    event_dict["app"] = "gas-tracker"
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Add severity level for cloud logging compatibility.
    Maps Python log levels to standard severity levels.
    """
    level = event_dict.get("level")
    if level:
        severity_map = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "critical": "CRITICAL",
        }
        event_dict["severity"] = severity_map.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, use human-readable format (dev mode).
        include_timestamp: Whether to include ISO timestamps in logs

    Usage:
        >>> from gas_tracker.infrastructure.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance with architectural context.

    Args:
        name: Logger name (typically __name__ of the calling module)
        layer: Architectural layer (infrastructure, ingestion, pipeline, storage)
        component: Specific component/service within the layer
        **initial_context: Additional context key-value pairs to bind to logger

    Returns:
        Configured structlog logger with bound context

    Usage:
        >>> log = get_logger(
        ...     __name__,
        ...     layer="ingestion",
        ...     component="alchemy-client",
        ...     network="opt-mainnet"
        ... )
        >>> log.info("gas_price_fetched", gas_price="0.001")
    """
    logger = structlog.get_logger(name)

    context = {}

    if layer:
        context["layer"] = layer

    if component:
        context["component"] = component

    if name:
        context["module"] = name

    context.update(initial_context)

    if context:
        logger = logger.bind(**context)

    return logger


# ============================================================================
# Layer-Specific Logger Factories
# ============================================================================


def get_infrastructure_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for infrastructure layer (config, HTTP transport).

    Usage:
        >>> log = get_infrastructure_logger("config-loader")
        >>> log.info("config_loaded", networks=4)
    """
    return get_logger(
        "infrastructure",
        layer="infrastructure",
        component=component,
        **context,
    )


def get_ingestion_logger(
    component: str,
    network: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for ingestion layer (price acquisition).

    Args:
        component: Component name (e.g., "alchemy-client", "jsonrpc-client")
        network: Network identifier (e.g., "opt-mainnet", "redstone") - optional
        **context: Additional context

    Usage:
        >>> log = get_ingestion_logger("jsonrpc-client", network="redstone")
        >>> log.info("fetching_gas_price")
    """
    ctx = {}
    if network:
        ctx["network"] = network
    ctx.update(context)

    return get_logger(
        "ingestion",
        layer="ingestion",
        component=component,
        **ctx,
    )


def get_pipeline_logger(
    component: str = "gas-price-collector",
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the pipeline layer (collector driver and per-network runs).

    Usage:
        >>> log = get_pipeline_logger(run_date="2024-05-01")
        >>> log.info("run_started")
    """
    return get_logger(
        "pipeline",
        layer="pipeline",
        component=component,
        **context,
    )


def get_storage_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for storage layer.

    Usage:
        >>> log = get_storage_logger("csv-store", network="base-mainnet")
        >>> log.info("row_appended", path="data/base-mainnet_gasPrices.csv")
    """
    return get_logger(
        "storage",
        layer="storage",
        component=component,
        **context,
    )
