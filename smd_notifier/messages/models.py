"""
Message unit models as decoded by the host gateway.

The notifier only reads these objects. Receipt content is carried as a generic
element tree (ElementNode/TextNode) so it does not depend on the XML library the
gateway used for parsing.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Attribute:
    """Attribute of an element, qualified only when namespace_uri is set."""
    local_name: str
    value: str
    namespace_uri: Optional[str] = None


@dataclass(frozen=True)
class TextNode:
    """Character content of an element."""
    text: str


@dataclass(frozen=True)
class ElementNode:
    """Generic XML element. Attribute and child order are significant."""
    local_name: str
    namespace_uri: Optional[str] = None     # None means "no namespace"
    prefix: Optional[str] = None
    attributes: list[Attribute] = field(default_factory=list)
    children: list[Union["ElementNode", TextNode]] = field(default_factory=list)

    @property
    def has_namespace(self) -> bool:
        """True if the element is namespace qualified."""
        return bool(self.namespace_uri)

    def child_elements(self) -> list["ElementNode"]:
        """Child elements only, in document order."""
        return [c for c in self.children if isinstance(c, ElementNode)]


class Severity(str, Enum):
    """ebMS error severity."""
    WARNING = "warning"
    FAILURE = "failure"


@dataclass(frozen=True)
class Description:
    """Language tagged long description of an error."""
    text: str
    language: Optional[str] = None


@dataclass(frozen=True)
class ErrorDetail:
    """Single error reported in an Error signal."""
    code: str
    severity: Severity
    detail: Optional[str] = None
    short_description: Optional[str] = None
    category: Optional[str] = None
    origin: Optional[str] = None
    description: Optional[Description] = None


@dataclass(frozen=True)
class MessageUnit:
    """Header data common to every message unit."""
    message_id: str
    timestamp: datetime
    ref_to_message_id: Optional[str] = None


@dataclass(frozen=True)
class Receipt(MessageUnit):
    """Receipt signal; content holds the child elements of the ebMS Receipt."""
    content: list[ElementNode] = field(default_factory=list)


@dataclass(frozen=True)
class ErrorSignal(MessageUnit):
    """Error signal carrying one or more errors."""
    errors: list[ErrorDetail] = field(default_factory=list)


@dataclass(frozen=True)
class UserMessage(MessageUnit):
    """Primary content message. Cannot be delivered as a notification."""
    payload_count: int = 0


Signal = Union[Receipt, ErrorSignal]
