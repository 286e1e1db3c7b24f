"""
Signal meta-data document model.

The document mirrors the ebMS signal header: message info plus either the
list of errors or the Receipt content. Receipt content is held as lxml
elements, ready to be placed in the serialized document.
"""

from dataclasses import dataclass, field
from typing import Optional

from lxml import etree

SMD_NAMESPACE = "http://holodeck-b2b.org/schemas/2015/08/smd"
SMD_PREFIX = "smd"
SMD_FILE_SUFFIX = ".smd.xml"


@dataclass(frozen=True)
class MessageInfo:
    """Identification of the signal message unit."""
    message_id: str
    ref_to_message_id: Optional[str] = None
    timestamp: Optional[str] = None     # xs:dateTime, None when not representable


@dataclass(frozen=True)
class DescriptionEntry:
    """Long error description with its language."""
    text: str
    language: Optional[str] = None


@dataclass(frozen=True)
class ErrorEntry:
    """One error of an Error signal."""
    error_code: str
    severity: str                       # symbolic name, e.g. "FAILURE"
    error_detail: Optional[str] = None
    short_description: Optional[str] = None
    category: Optional[str] = None
    origin: Optional[str] = None
    description: Optional[DescriptionEntry] = None


@dataclass(frozen=True)
class ReceiptEntry:
    """Receipt content copied from the signal."""
    content: list[etree._Element] = field(default_factory=list)


@dataclass(frozen=True)
class SignalMetaDataDocument:
    """Normalized notification for one signal. Holds errors or a receipt, never both."""
    message_info: MessageInfo
    errors: Optional[list[ErrorEntry]] = None
    receipt: Optional[ReceiptEntry] = None

    def __post_init__(self):
        if (self.errors is None) == (self.receipt is None):
            raise ValueError("SMD document must contain either errors or a receipt")

    @property
    def is_error(self) -> bool:
        return self.errors is not None

    @property
    def is_receipt(self) -> bool:
        return self.receipt is not None
