"""Signal notification delivery."""

from .base import BaseSignalDelivery, DeliveryResult, DeliveryStatus, NotificationStage
from .factory import SignalNotifierFactory
from .file_allocator import FileAllocation, UniqueFileAllocator, sanitize_message_id
from .file_delivery import FileSignalNotifier

__all__ = [
    "BaseSignalDelivery",
    "DeliveryResult",
    "DeliveryStatus",
    "FileAllocation",
    "FileSignalNotifier",
    "NotificationStage",
    "SignalNotifierFactory",
    "UniqueFileAllocator",
    "sanitize_message_id",
]
