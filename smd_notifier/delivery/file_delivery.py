"""File-based signal notification mechanism."""

from pathlib import Path
from typing import Optional

from lxml import etree

from ..config.directory import is_writable_directory
from ..config.notifier import NotifierConfig
from ..errors import DeliveryError, DocumentConstructionError, FailureReason
from ..logging import log_stage_transition
from ..messages.models import ErrorSignal, MessageUnit, Receipt
from ..smd.builder import SignalDocumentBuilder
from ..smd.models import SMD_FILE_SUFFIX, SignalMetaDataDocument
from ..smd.serializer import write_document
from .base import BaseSignalDelivery, NotificationStage
from .file_allocator import UniqueFileAllocator, sanitize_message_id


class FileSignalNotifier(BaseSignalDelivery):
    """
    Notifies the business application about received signals by writing
    a signal meta-data document per signal to the target directory.

    Only Receipt and Error signals can be delivered this way. Each call is
    independent; the only shared resource is the target directory, and
    exclusive file creation keeps concurrent notifications apart.
    """

    def __init__(self, config: NotifierConfig, name: str = "smd_file",
                 builder: Optional[SignalDocumentBuilder] = None,
                 allocator: Optional[UniqueFileAllocator] = None):
        super().__init__(name, config)
        self.config: NotifierConfig = config
        self.builder = builder or SignalDocumentBuilder()
        self.allocator = allocator or UniqueFileAllocator(suffix=SMD_FILE_SUFFIX)

    def destination_for(self, message_id: str) -> Path:
        """Preferred path of the SMD file for a message id."""
        return self.config.target_directory / f"{sanitize_message_id(message_id)}{SMD_FILE_SUFFIX}"

    def write_notification(self, msg_unit: MessageUnit) -> Path:
        """
        Write the signal meta-data document for a Receipt or Error signal.

        Args:
            msg_unit: The received signal

        Returns:
            Path of the written file

        Raises:
            DeliveryError: If the message is not a signal, or the document
                could not be created or written
        """
        sig_type = type(msg_unit).__name__
        message_id = getattr(msg_unit, "message_id", None)

        stage = NotificationStage.CLASSIFY
        if not isinstance(msg_unit, (Receipt, ErrorSignal)):
            self.logger.warning(
                "This delivery method can not be used for delivery of User Messages!",
                message_type=sig_type,
                message_id=message_id
            )
            raise self._fail(
                message_id, stage, FailureReason.UNSUPPORTED_MESSAGE_KIND,
                f"This delivery method can not be used for {sig_type} messages!"
            )

        stage = self._advance(message_id, stage, NotificationStage.BUILD, sig_type)
        self.logger.debug("Create SMD", message_type=sig_type, message_id=message_id)
        try:
            smd = self._build(msg_unit)
        except DocumentConstructionError as e:
            self.logger.error("Failed to create the SMD", message_type=sig_type, message_id=message_id,
                              error=str(e))
            raise self._fail(
                message_id, stage, FailureReason.DOCUMENT_CONSTRUCTION_UNAVAILABLE,
                "Could not create meta-data document for Signal message", e
            ) from e
        except ValueError as e:
            self.logger.error("Failed to create the SMD", message_type=sig_type, message_id=message_id,
                              error=str(e))
            raise self._fail(
                message_id, stage, FailureReason.DOCUMENT_CONSTRUCTION_FAILED,
                "Could not create meta-data document for Signal message", e
            ) from e

        stage = self._advance(message_id, stage, NotificationStage.ALLOCATE, "document_built")
        try:
            allocation = self.allocator.allocate(self.destination_for(message_id))
        except OSError as e:
            self.logger.error(
                "Can not create a file in output directory to write Signal meta-data",
                directory=str(self.config.target_directory),
                message_id=message_id,
                error=str(e)
            )
            raise self._fail(
                message_id, stage, FailureReason.DESTINATION_UNAVAILABLE,
                "Could not create file for delivery of Signal", e
            ) from e

        stage = self._advance(message_id, stage, NotificationStage.SERIALIZE, "file_allocated",
                              {"path": str(allocation.path)})
        self.logger.debug("Write SMD", message_type=sig_type, message_id=message_id,
                          output_path=str(allocation.path))
        try:
            with allocation:
                write_document(smd, allocation.handle)
        except (OSError, ValueError, TypeError, etree.LxmlError) as e:
            # A partially written file is left as it is; lxml rejects
            # strings that are not XML compatible with ValueError
            self.logger.error(
                "Could not write SMD",
                message_type=sig_type,
                message_id=message_id,
                output_path=str(allocation.path),
                error=str(e)
            )
            raise self._fail(
                message_id, stage, FailureReason.WRITE_FAILED,
                "Could not write the SMD file!", e
            ) from e

        self._advance(message_id, stage, NotificationStage.DONE, "document_written")
        self.logger.info("Signal written to file", message_id=message_id,
                         output_path=str(allocation.path))
        return allocation.path

    def health_check(self) -> bool:
        """Check if the target directory is writable."""
        healthy = is_writable_directory(self.config.target_directory)
        if not healthy:
            self.logger.warning("Health check failed", directory=str(self.config.target_directory))
        return healthy

    def _build(self, msg_unit: MessageUnit) -> SignalMetaDataDocument:
        if isinstance(msg_unit, Receipt):
            return self.builder.from_receipt(msg_unit, self.config.include_receipt_content)
        return self.builder.from_error(msg_unit)

    def _advance(self, message_id: Optional[str], from_stage: NotificationStage,
                 to_stage: NotificationStage, trigger: str,
                 context: Optional[dict] = None) -> NotificationStage:
        log_stage_transition(self.logger, str(message_id), from_stage.value, to_stage.value,
                             trigger, context)
        return to_stage

    def _fail(self, message_id: Optional[str], stage: NotificationStage,
              reason: FailureReason, message: str,
              cause: Optional[BaseException] = None) -> DeliveryError:
        self._advance(message_id, stage, NotificationStage.FAILED, reason.value)
        return DeliveryError(
            message,
            reason=reason,
            message_id=message_id,
            delivery_method=self.name,
            cause=cause,
            context={"stage": stage.value}
        )
