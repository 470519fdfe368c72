"""
Observability for the collector: structured logs are the only channel through
which a run reports skipped networks, failed fetches and aborted runs, so every
layer logs through the factories exported here.
"""

from .logging import (
    # Layer-specific logger factories
    get_infrastructure_logger,
    get_ingestion_logger,
    # Base logger factory
    get_logger,
    get_pipeline_logger,
    get_storage_logger,
    # Setup
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_infrastructure_logger",
    "get_ingestion_logger",
    "get_pipeline_logger",
    "get_storage_logger",
]
