#!/usr/bin/env python3
"""
Basic Usage Example - SMD Notifier

This script demonstrates how a gateway hands received signals to the file
notifier. It shows how to:
- Initialize the delivery method from settings
- Deliver a Receipt and an Error signal
- Handle the failure for a message that is not a signal

Run: python examples/basic_usage.py [target-directory]
"""

import sys
from datetime import datetime, timezone

from smd_notifier.delivery import SignalNotifierFactory
from smd_notifier.errors import DeliveryError
from smd_notifier.logging import configure_logging
from smd_notifier.messages import (
    Attribute,
    Description,
    ElementNode,
    ErrorDetail,
    ErrorSignal,
    Receipt,
    Severity,
    TextNode,
    UserMessage,
)

EBBP_NS = "http://docs.oasis-open.org/ebxml-bp/ebbp-signals-2.0"


def create_sample_receipt() -> Receipt:
    """Create a Receipt acknowledging a user message."""
    reference = ElementNode(
        local_name="MessagePartNRInformation",
        namespace_uri=EBBP_NS,
        prefix="ebbp",
        attributes=[Attribute("id", "part-1")],
        children=[TextNode("digest-value")],
    )
    return Receipt(
        message_id="urn:uuid:6a2f@example.org",
        ref_to_message_id="user-msg-001@example.org",
        timestamp=datetime.now(timezone.utc),
        content=[
            ElementNode(
                local_name="NonRepudiationInformation",
                namespace_uri=EBBP_NS,
                prefix="ebbp",
                children=[reference],
            )
        ],
    )


def create_sample_error() -> ErrorSignal:
    """Create an Error signal with a single failure."""
    return ErrorSignal(
        message_id="err-0001@example.org",
        ref_to_message_id="user-msg-002@example.org",
        timestamp=datetime.now(timezone.utc),
        errors=[
            ErrorDetail(
                code="EBMS:0004",
                severity=Severity.FAILURE,
                detail="Payload could not be processed",
                short_description="Other",
                category="Content",
                origin="ebMS",
                description=Description("Unexpected payload format", "en"),
            )
        ],
    )


def main():
    """Run the example."""
    configure_logging(level="DEBUG")
    target_dir = sys.argv[1] if len(sys.argv) > 1 else "smd_out"

    factory = SignalNotifierFactory()
    factory.init({"targetDirectory": target_dir, "includeReceiptContent": "no"})
    notifier = factory.create_deliverer()

    for result in notifier.deliver_all([create_sample_receipt(), create_sample_error()]):
        print(f"{result.message_id}: {result.status.value} - {result.message}")

    try:
        notifier.deliver(UserMessage(
            message_id="user-msg-003@example.org",
            timestamp=datetime.now(timezone.utc),
        ))
    except DeliveryError as e:
        print(f"Rejected: {e} ({e.reason.value})")


if __name__ == "__main__":
    main()
