"""
Structured logging with correlation IDs.

Provides a consistent logging setup for the entry point and the MCP server
so that a single community search can be traced through ingestion, the
analytic stages and result assembly.
"""

import logging
import uuid


def setup_logging(service_name: str, level: str = "INFO") -> logging.Logger:
    """
    Configure structured logging for a service.

    Args:
        service_name: Name of the service (used as logger prefix).
        level: Log level string (e.g. 'INFO', 'DEBUG').

    Returns:
        Configured logger instance.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )
    return logging.getLogger(service_name)


def generate_correlation_id() -> str:
    """Generate a unique correlation ID for tracing one search request."""
    return uuid.uuid4().hex[:12]
