"""Signal meta-data (SMD) document model, construction and serialization."""

from .builder import SignalDocumentBuilder
from .converter import DocumentConverter
from .models import (
    SMD_NAMESPACE,
    DescriptionEntry,
    ErrorEntry,
    MessageInfo,
    ReceiptEntry,
    SignalMetaDataDocument,
)
from .serializer import render_document, write_document

__all__ = [
    "SMD_NAMESPACE",
    "DescriptionEntry",
    "DocumentConverter",
    "ErrorEntry",
    "MessageInfo",
    "ReceiptEntry",
    "SignalDocumentBuilder",
    "SignalMetaDataDocument",
    "render_document",
    "write_document",
]
