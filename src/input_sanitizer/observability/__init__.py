"""Observability helpers: JSON-lines logging wired into structlog."""

from input_sanitizer.observability.logging import (
    DEFAULT_LOGGER_NAME,
    configure_from_config,
    configure_logging,
    shutdown_logging,
)

__all__ = [
    "DEFAULT_LOGGER_NAME",
    "configure_from_config",
    "configure_logging",
    "shutdown_logging",
]
