"""Base classes for signal delivery mechanisms."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional

from ..errors import DeliveryError, FailureReason
from ..logging import get_delivery_logger
from ..messages.models import MessageUnit


class DeliveryStatus(Enum):
    """Signal delivery status."""
    SUCCESS = "success"
    FAILED = "failed"


class NotificationStage(str, Enum):
    """Stages of a single notification run."""
    CLASSIFY = "classify"
    BUILD = "build"
    ALLOCATE = "allocate"
    SERIALIZE = "serialize"
    DONE = "done"
    FAILED = "failed"


@dataclass
class DeliveryResult:
    """Result of a signal delivery attempt."""
    status: DeliveryStatus
    message_id: Optional[str] = None
    message: Optional[str] = None
    path: Optional[Path] = None
    delivery_time_ms: Optional[int] = None
    reason: Optional[FailureReason] = None
    error: Optional[Exception] = None


class BaseSignalDelivery(ABC):
    """Base class for signal delivery mechanisms."""

    def __init__(self, name: str, config: Any):
        self.name = name
        self.config = config
        self.logger = get_delivery_logger(f"signal.delivery.{name}").bind(delivery_name=name)

    @abstractmethod
    def write_notification(self, msg_unit: MessageUnit) -> Path:
        """
        Deliver one signal and return where it was written.

        Raises:
            DeliveryError: If the signal could not be delivered
        """

    @abstractmethod
    def health_check(self) -> bool:
        """Check if delivery mechanism is healthy."""

    def deliver(self, msg_unit: MessageUnit) -> None:
        """
        Deliver one signal to the business application.

        Raises:
            DeliveryError: If the signal could not be delivered
        """
        self.write_notification(msg_unit)

    def supports_async_delivery(self) -> bool:
        """Whether the gateway may hand over signals for asynchronous delivery."""
        return False

    def deliver_all(self, msg_units: Iterable[MessageUnit]) -> list[DeliveryResult]:
        """
        Deliver several signals independently of each other.

        A failed signal is reported in its result and does not stop the
        delivery of the remaining signals.

        Args:
            msg_units: Signals to deliver

        Returns:
            List of delivery results for each signal
        """
        results = []

        for msg_unit in msg_units:
            message_id = getattr(msg_unit, "message_id", None)
            start_time = time.time()
            try:
                path = self.write_notification(msg_unit)
            except DeliveryError as e:
                results.append(DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message_id=message_id,
                    message=str(e),
                    reason=e.reason,
                    error=e
                ))
                continue

            results.append(DeliveryResult(
                status=DeliveryStatus.SUCCESS,
                message_id=message_id,
                message=f"Written to {path}",
                path=path,
                delivery_time_ms=int((time.time() - start_time) * 1000)
            ))

        return results
