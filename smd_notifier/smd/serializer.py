"""Serialization of signal meta-data documents to XML."""

import copy
from typing import BinaryIO, Optional

from lxml import etree

from .models import SMD_NAMESPACE, SMD_PREFIX, ErrorEntry, SignalMetaDataDocument

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


def _smd(name: str) -> str:
    return f"{{{SMD_NAMESPACE}}}{name}"


def _set_optional(element: etree._Element, name: str, value: Optional[str]) -> None:
    if value:
        element.set(name, value)


def _add_text_child(parent: etree._Element, name: str, value: Optional[str]) -> None:
    if value is not None:
        etree.SubElement(parent, _smd(name)).text = value


def _render_error(parent: etree._Element, entry: ErrorEntry) -> None:
    error = etree.SubElement(parent, _smd("Error"))
    error.set("errorCode", entry.error_code)
    error.set("severity", entry.severity)
    _set_optional(error, "category", entry.category)
    _set_optional(error, "origin", entry.origin)
    _set_optional(error, "shortDescription", entry.short_description)

    if entry.description is not None:
        description = etree.SubElement(error, _smd("Description"))
        description.text = entry.description.text
        _set_optional(description, XML_LANG, entry.description.language)

    _add_text_child(error, "ErrorDetail", entry.error_detail)


def render_document(document: SignalMetaDataDocument) -> etree._Element:
    """
    Build the XML tree for a signal meta-data document.

    Receipt content is deep copied, so a document can be rendered more than once.
    """
    root = etree.Element(_smd("SignalMessage"), nsmap={SMD_PREFIX: SMD_NAMESPACE})

    info = document.message_info
    msg_info = etree.SubElement(root, _smd("MessageInfo"))
    _add_text_child(msg_info, "Timestamp", info.timestamp)
    _add_text_child(msg_info, "MessageId", info.message_id)
    _add_text_child(msg_info, "RefToMessageId", info.ref_to_message_id)

    if document.is_error:
        for entry in document.errors:
            _render_error(root, entry)
    else:
        receipt = etree.SubElement(root, _smd("Receipt"))
        for element in document.receipt.content:
            receipt.append(copy.deepcopy(element))

    return root


def write_document(document: SignalMetaDataDocument, handle: BinaryIO) -> None:
    """Write the document as indented UTF-8 XML to an open binary handle."""
    tree = etree.ElementTree(render_document(document))
    tree.write(handle, encoding="UTF-8", xml_declaration=True, pretty_print=True)

