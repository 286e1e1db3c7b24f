"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from lxml import etree

from smd_notifier.config import NotifierConfig
from smd_notifier.delivery import FileSignalNotifier
from smd_notifier.messages import (
    Attribute,
    Description,
    ElementNode,
    ErrorDetail,
    ErrorSignal,
    Receipt,
    Severity,
    TextNode,
)

EBBP_NS = "http://docs.oasis-open.org/ebxml-bp/ebbp-signals-2.0"
DSIG_NS = "http://www.w3.org/2000/09/xmldsig#"
XLINK_NS = "http://www.w3.org/1999/xlink"


def element_to_node(element: etree._Element) -> ElementNode:
    """
    Read an lxml element back into the generic element model.

    Comments and processing instructions are skipped; text around them is kept.
    """
    name = etree.QName(element)

    attributes = []
    for key, value in element.attrib.items():
        attr_name = etree.QName(key)
        attributes.append(Attribute(attr_name.localname, value, attr_name.namespace))

    children: list[Union[ElementNode, TextNode]] = []
    if element.text is not None:
        children.append(TextNode(element.text))
    for child in element:
        if isinstance(child.tag, str):
            children.append(element_to_node(child))
        if child.tail is not None:
            children.append(TextNode(child.tail))

    return ElementNode(
        local_name=name.localname,
        namespace_uri=name.namespace,
        prefix=element.prefix,
        attributes=attributes,
        children=children,
    )


def parse_xml_datetime(value: str) -> datetime:
    """Parse an xs:dateTime value, "Z" suffix accepted."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@pytest.fixture
def signal_time() -> datetime:
    """Timestamp used for the sample signals."""
    return datetime(2023, 1, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def nrr_element() -> ElementNode:
    """Non-repudiation information as found in a Receipt."""
    return ElementNode(
        local_name="NonRepudiationInformation",
        namespace_uri=EBBP_NS,
        prefix="ebbp",
        children=[
            TextNode("\n  "),
            ElementNode(
                local_name="MessagePartNRInformation",
                namespace_uri=EBBP_NS,
                prefix="ebbp",
                attributes=[
                    Attribute("id", "part-1"),
                    Attribute("href", "cid:part1@example.org", XLINK_NS),
                ],
                children=[
                    ElementNode(
                        local_name="Reference",
                        namespace_uri=DSIG_NS,
                        prefix="ds",
                        attributes=[Attribute("URI", "#body")],
                        children=[
                            ElementNode(local_name="DigestValue", namespace_uri=DSIG_NS, prefix="ds",
                                        children=[TextNode("q2FzZQ==")]),
                        ],
                    ),
                ],
            ),
            TextNode("\n"),
        ],
    )


@pytest.fixture
def user_message_element() -> ElementNode:
    """Copy of a user message header, as found in a reception awareness Receipt."""
    return ElementNode(
        local_name="UserMessage",
        namespace_uri="http://docs.oasis-open.org/ebxml-msg/ebms/v3.0/ns/core/200704/",
        prefix="eb",
        children=[ElementNode(local_name="MessageInfo",
                              namespace_uri="http://docs.oasis-open.org/ebxml-msg/ebms/v3.0/ns/core/200704/",
                              prefix="eb")],
    )


@pytest.fixture
def sample_receipt(signal_time, nrr_element, user_message_element) -> Receipt:
    """Receipt with two content elements."""
    return Receipt(
        message_id="rcpt-001@example.org",
        ref_to_message_id="user-001@example.org",
        timestamp=signal_time,
        content=[nrr_element, user_message_element],
    )


@pytest.fixture
def sample_error(signal_time) -> ErrorSignal:
    """Error signal with a failure and a warning."""
    return ErrorSignal(
        message_id="err-001@example.org",
        ref_to_message_id="user-001@example.org",
        timestamp=signal_time,
        errors=[
            ErrorDetail(
                code="EBMS:0004",
                severity=Severity.FAILURE,
                detail="Payload could not be processed",
                short_description="Other",
                category="Content",
                origin="ebMS",
                description=Description("Unexpected payload format", "en"),
            ),
            ErrorDetail(
                code="EBMS:0301",
                severity=Severity.WARNING,
                detail="Receipt was not received in time",
                short_description="MissingReceipt",
                category="Communication",
                origin="reliability",
                description=Description("", "en"),
            ),
        ],
    )


@pytest.fixture
def target_dir(tmp_path) -> Path:
    """Empty delivery directory."""
    path = tmp_path / "smd"
    path.mkdir()
    return path


@pytest.fixture
def notifier(target_dir) -> FileSignalNotifier:
    """Notifier writing to the temporary delivery directory."""
    return FileSignalNotifier(NotifierConfig(target_directory=target_dir))
