"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across registry construction, mode
resolution and session activation.

Usage:
    from src.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="resolve_mode",
        outcome="success",
        mode_name="login",
    )
"""

import logging
from typing import Any


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured logger instance with the 'shell_modes.services' prefix.

    Example:
        >>> logger = get_service_logger(__name__)
        >>> logger.name
        'shell_modes.services.mode_registry'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"shell_modes.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The message is ``"<operation>: <outcome>"``; the operation, outcome and
    any additional context fields are passed via ``extra``.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "resolve_mode", "probe_indicator")
        outcome: Outcome description (e.g., "success", "unavailable")
        level: Log level (default: INFO)
        **context: Additional context fields
            Common fields:
            - mode_name: Mode being resolved or activated
            - indicator: Indicator name being probed
            - error: Error message if the outcome is a failure
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
