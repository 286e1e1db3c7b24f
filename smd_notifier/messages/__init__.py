"""Message units handed over by the host gateway."""

from .models import (
    Attribute,
    Description,
    ElementNode,
    ErrorDetail,
    ErrorSignal,
    MessageUnit,
    Receipt,
    Severity,
    Signal,
    TextNode,
    UserMessage,
)

__all__ = [
    "Attribute",
    "Description",
    "ElementNode",
    "ErrorDetail",
    "ErrorSignal",
    "MessageUnit",
    "Receipt",
    "Severity",
    "Signal",
    "TextNode",
    "UserMessage",
]
