"""Tests for signal meta-data document construction."""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import Mock, patch

from smd_notifier.errors import DocumentConstructionError
from smd_notifier.messages import Description, ErrorDetail, ErrorSignal, Receipt, Severity
from smd_notifier.smd import SignalDocumentBuilder, SignalMetaDataDocument, MessageInfo, ReceiptEntry
from smd_notifier.smd.builder import create_converter
from smd_notifier.smd.converter import DocumentConverter

from conftest import element_to_node


class TestFromError:
    """Test SMD creation for Error signals."""

    def setup_method(self):
        self.builder = SignalDocumentBuilder()

    def test_message_info_copied(self, sample_error):
        smd = self.builder.from_error(sample_error)

        assert smd.message_info.message_id == "err-001@example.org"
        assert smd.message_info.ref_to_message_id == "user-001@example.org"
        assert smd.message_info.timestamp == "2023-01-01T12:00:00.123+00:00"
        assert smd.is_error
        assert not smd.is_receipt

    def test_one_entry_per_error_in_order(self, sample_error):
        smd = self.builder.from_error(sample_error)

        assert len(smd.errors) == len(sample_error.errors)
        assert [e.error_code for e in smd.errors] == ["EBMS:0004", "EBMS:0301"]

    def test_error_fields_mapped(self, sample_error):
        entry = self.builder.from_error(sample_error).errors[0]

        assert entry.severity == "FAILURE"
        assert entry.error_detail == "Payload could not be processed"
        assert entry.short_description == "Other"
        assert entry.category == "Content"
        assert entry.origin == "ebMS"
        assert entry.description.text == "Unexpected payload format"
        assert entry.description.language == "en"

    def test_severity_uses_symbolic_name(self, sample_error):
        entry = self.builder.from_error(sample_error).errors[1]

        assert entry.severity == "WARNING"

    @pytest.mark.parametrize("description", [None, Description("", "en"), Description("   ", "de")])
    def test_empty_description_omitted(self, signal_time, description):
        error = ErrorSignal(
            message_id="e1",
            timestamp=signal_time,
            errors=[ErrorDetail(code="EBMS:0001", severity=Severity.FAILURE, description=description)],
        )

        entry = self.builder.from_error(error).errors[0]

        assert entry.description is None

    def test_no_errors(self, signal_time):
        """An Error signal without errors still produces an error document."""
        smd = self.builder.from_error(ErrorSignal(message_id="e2", timestamp=signal_time))

        assert smd.errors == []
        assert smd.is_error

    def test_many_errors(self, signal_time):
        details = [ErrorDetail(code=f"EBMS:{i:04d}", severity=Severity.WARNING) for i in range(25)]
        smd = self.builder.from_error(ErrorSignal(message_id="e3", timestamp=signal_time, errors=details))

        assert [e.error_code for e in smd.errors] == [d.code for d in details]


class TestFromReceipt:
    """Test SMD creation for Receipts."""

    def setup_method(self):
        self.builder = SignalDocumentBuilder()

    def test_first_child_only(self, sample_receipt):
        smd = self.builder.from_receipt(sample_receipt, include_full_content=False)

        assert smd.is_receipt
        assert smd.errors is None
        assert len(smd.receipt.content) == 1
        assert element_to_node(smd.receipt.content[0]) == sample_receipt.content[0]

    def test_first_child_is_default(self, sample_receipt):
        smd = self.builder.from_receipt(sample_receipt)

        assert len(smd.receipt.content) == 1

    def test_full_content(self, sample_receipt):
        smd = self.builder.from_receipt(sample_receipt, include_full_content=True)

        assert [element_to_node(e) for e in smd.receipt.content] == sample_receipt.content

    def test_first_child_keeps_full_subtree(self, sample_receipt):
        smd = self.builder.from_receipt(sample_receipt)

        converted = smd.receipt.content[0]
        assert len(list(converted.iter())) == 4

    def test_empty_content_first_child_mode(self, signal_time):
        receipt = Receipt(message_id="r1", timestamp=signal_time)

        with pytest.raises(ValueError):
            self.builder.from_receipt(receipt)

    def test_empty_content_full_mode(self, signal_time):
        receipt = Receipt(message_id="r1", timestamp=signal_time)

        smd = self.builder.from_receipt(receipt, include_full_content=True)

        assert smd.receipt.content == []

    def test_construction_unavailable_raises(self, sample_receipt):
        factory = Mock(side_effect=DocumentConstructionError("no parser"))
        builder = SignalDocumentBuilder(converter_factory=factory)

        with pytest.raises(DocumentConstructionError) as exc_info:
            builder.from_receipt(sample_receipt)

        assert str(exc_info.value) == "no parser"
        factory.assert_called_once()


class TestCreateConverter:
    """Test setup of the XML construction context."""

    def test_returns_converter(self):
        assert isinstance(create_converter(), DocumentConverter)

    def test_parser_setup_failure(self):
        with patch("smd_notifier.smd.builder.etree.XMLParser", side_effect=MemoryError()):
            with pytest.raises(DocumentConstructionError) as exc_info:
                create_converter()

        assert isinstance(exc_info.value.__cause__, MemoryError)

    def test_element_creation_failure(self):
        parser = Mock()
        parser.makeelement.side_effect = MemoryError()

        with patch("smd_notifier.smd.builder.etree.XMLParser", return_value=parser):
            with pytest.raises(DocumentConstructionError) as exc_info:
                create_converter()

        assert "MemoryError" in exc_info.value.context["error"]

    def test_failure_reaches_builder(self, sample_receipt):
        with patch("smd_notifier.smd.builder.etree.XMLParser", side_effect=MemoryError()):
            with pytest.raises(DocumentConstructionError):
                SignalDocumentBuilder().from_receipt(sample_receipt)


class TestTimestamps:
    """Test timestamp handling in message info."""

    def setup_method(self):
        self.builder = SignalDocumentBuilder()

    def test_naive_timestamp_is_utc(self):
        error = ErrorSignal(message_id="e", timestamp=datetime(2023, 5, 1, 8, 30, 0, 5000))

        smd = self.builder.from_error(error)

        assert smd.message_info.timestamp == "2023-05-01T08:30:00.005+00:00"

    def test_offset_preserved(self):
        tz = timezone(timedelta(hours=2))
        error = ErrorSignal(message_id="e", timestamp=datetime(2023, 5, 1, 8, 30, tzinfo=tz))

        smd = self.builder.from_error(error)

        assert smd.message_info.timestamp == "2023-05-01T08:30:00.000+02:00"

    def test_unrepresentable_timestamp_is_none(self):
        error = ErrorSignal(message_id="e", timestamp="not a date")

        smd = self.builder.from_error(error)

        assert smd.message_info.timestamp is None


class TestSignalMetaDataDocument:
    """Test the payload invariant of the document."""

    def test_requires_payload(self):
        with pytest.raises(ValueError):
            SignalMetaDataDocument(message_info=MessageInfo("m"))

    def test_rejects_both_payloads(self):
        with pytest.raises(ValueError):
            SignalMetaDataDocument(message_info=MessageInfo("m"), errors=[], receipt=ReceiptEntry())
