"""
Builds signal meta-data documents from received signals.

Error signals map one to one onto Error entries. For Receipts only the first
child element of the Receipt is included unless full content is requested;
the first child is enough for the business application to determine the kind
of Receipt without receiving a possibly large acknowledgement payload.
"""

from typing import Callable, Optional

from lxml import etree

from ..errors import DocumentConstructionError
from ..logging import get_logger
from ..messages.models import ErrorDetail, ErrorSignal, MessageUnit, Receipt
from ..utils.time import to_xml_datetime
from .converter import DocumentConverter
from .models import (
    DescriptionEntry,
    ErrorEntry,
    MessageInfo,
    ReceiptEntry,
    SignalMetaDataDocument,
)

logger = get_logger(__name__)


def create_converter() -> DocumentConverter:
    """
    Set up the XML construction context used for Receipt content.

    The context is checked by creating an element with it, so a failing
    parser setup or element allocation is reported here.

    Raises:
        DocumentConstructionError: If the context cannot be initialized
    """
    try:
        parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
        parser.makeelement("Receipt")
    except (etree.LxmlError, MemoryError) as e:
        raise DocumentConstructionError(
            "Cannot initialize XML construction context", context={"error": repr(e)}
        ) from e
    return DocumentConverter(parser)


class SignalDocumentBuilder:
    """Creates SignalMetaDataDocument instances for Receipt and Error signals."""

    def __init__(self, converter_factory: Optional[Callable[[], DocumentConverter]] = None):
        self._converter_factory = converter_factory or create_converter

    def from_error(self, error: ErrorSignal) -> SignalMetaDataDocument:
        """
        Create the SMD for an Error signal.

        Args:
            error: The received Error signal

        Returns:
            Document with one error entry per reported error, in order
        """
        return SignalMetaDataDocument(
            message_info=self._message_info(error),
            errors=[self._error_entry(e) for e in error.errors],
        )

    def from_receipt(self, receipt: Receipt,
                     include_full_content: bool = False) -> SignalMetaDataDocument:
        """
        Create the SMD for a Receipt signal.

        Args:
            receipt: The received Receipt signal
            include_full_content: Copy all Receipt content instead of only the
                first child element

        Returns:
            The document

        Raises:
            DocumentConstructionError: If the XML construction context is unavailable
            ValueError: If only the first child is requested but the Receipt is empty
        """
        if not include_full_content and not receipt.content:
            raise ValueError(f"Receipt {receipt.message_id} has no content")

        try:
            converter = self._converter_factory()
        except DocumentConstructionError as e:
            logger.error(
                "Document construction unavailable",
                message_id=receipt.message_id,
                error=str(e)
            )
            raise

        if include_full_content:
            content = converter.convert_all(receipt.content)
        else:
            content = [converter.convert(receipt.content[0])]

        return SignalMetaDataDocument(
            message_info=self._message_info(receipt),
            receipt=ReceiptEntry(content=content),
        )

    @staticmethod
    def _message_info(msg_unit: MessageUnit) -> MessageInfo:
        return MessageInfo(
            message_id=msg_unit.message_id,
            ref_to_message_id=msg_unit.ref_to_message_id,
            timestamp=to_xml_datetime(msg_unit.timestamp),
        )

    @staticmethod
    def _error_entry(error: ErrorDetail) -> ErrorEntry:
        description = None
        if error.description is not None and error.description.text and error.description.text.strip():
            description = DescriptionEntry(
                text=error.description.text,
                language=error.description.language,
            )

        return ErrorEntry(
            error_code=error.code,
            severity=error.severity.name,
            error_detail=error.detail,
            short_description=error.short_description,
            category=error.category,
            origin=error.origin,
            description=description,
        )
