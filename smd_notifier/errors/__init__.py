"""
Error classification for signal notification.

All failures of a single delivery surface as DeliveryError carrying a
FailureReason; configuration problems surface as ConfigurationError.
"""

from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    DocumentConstructionError,
    DeliveryError,
    FailureReason,
)

__all__ = [
    "SystemFailureError",
    "ConfigurationError",
    "DocumentConstructionError",
    "DeliveryError",
    "FailureReason",
]
