"""
Centralized logging configuration for the SMD notifier.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the notifier should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_delivery_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the signal delivery subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for signal delivery
    """
    return get_logger(name).bind(subsystem="signal_delivery")


def log_stage_transition(
    logger: FilteringBoundLogger,
    message_id: str,
    from_stage: str,
    to_stage: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a notification stage transition with standardized format.

    Args:
        logger: Structlog logger instance
        message_id: Message id of the signal being delivered
        from_stage: Current stage
        to_stage: Target stage
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        message_id=message_id,
        from_stage=from_stage,
        to_stage=to_stage,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Stage transition")
