"""
System failure error classifications for signal notification.

These exceptions represent failures that end the delivery of a single signal.
They never leave shared state behind, so subsequent signals can be delivered
normally.
"""

from enum import Enum
from typing import Optional, Dict, Any


class FailureReason(str, Enum):
    """Why the delivery of a signal failed."""
    UNSUPPORTED_MESSAGE_KIND = "unsupported_message_kind"
    DOCUMENT_CONSTRUCTION_FAILED = "document_construction_failed"
    DOCUMENT_CONSTRUCTION_UNAVAILABLE = "document_construction_unavailable"
    DESTINATION_UNAVAILABLE = "destination_unavailable"
    WRITE_FAILED = "write_failed"


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Invalid notifier settings or unusable delivery directory."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.setting = setting


class DocumentConstructionError(SystemFailureError):
    """The XML construction context could not be initialized."""


class DeliveryError(SystemFailureError):
    """Signal delivery failure reported to the host gateway."""

    def __init__(self, message: str, reason: FailureReason,
                 message_id: Optional[str] = None,
                 delivery_method: Optional[str] = None,
                 cause: Optional[BaseException] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reason = reason
        self.message_id = message_id
        self.delivery_method = delivery_method
        self.cause = cause
