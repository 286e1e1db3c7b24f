"""
Logging configuration and utilities for the SMD notifier.
"""
from .config import configure_logging, get_delivery_logger, get_logger, log_stage_transition

__all__ = ["configure_logging", "get_logger", "get_delivery_logger", "log_stage_transition"]
