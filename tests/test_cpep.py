import pytest

from rawacpi.common import SDT_HEADER_SIZE, AcpiError, SDTHeader
from rawacpi.cpep import (
    CorrectedPlatformErrorPolling,
    CorrectedPlatformErrorPollingProcessor,
)


def _processors():
    return (
        CorrectedPlatformErrorPollingProcessor(0, 8, 1, 0, 1000),
        CorrectedPlatformErrorPollingProcessor(0, 8, 2, 1, 500),
    )


def _table(processors=None):
    processors = _processors() if processors is None else processors
    length = (
        CorrectedPlatformErrorPolling.FIXED_SIZE
        + len(processors) * CorrectedPlatformErrorPollingProcessor.SIZE
    )
    return CorrectedPlatformErrorPolling(
        header=SDTHeader(signature=b"CPEP", length=length),
        cpep_processor_structures=processors,
    )


def test_processor_size_matches_format():
    assert len(_processors()[0].to_bytes()) == 8
    assert len(_table(()).to_bytes()) == SDT_HEADER_SIZE + 8


def test_processor_round_trip():
    processor = CorrectedPlatformErrorPollingProcessor(0, 8, 3, 4, 250)
    assert CorrectedPlatformErrorPollingProcessor.from_bytes(processor.to_bytes()) == processor


def test_processor_from_bytes_fields():
    raw = bytes([0, 8, 5, 6]) + (42).to_bytes(4, "little")
    processor = CorrectedPlatformErrorPollingProcessor.from_bytes(raw)
    assert processor.processor_id == 5
    assert processor.processor_eid == 6
    assert processor.polling_interval == 42


def test_table_round_trip():
    table = _table()
    encoded = table.to_bytes()
    assert len(encoded) == table.header.length
    parsed = CorrectedPlatformErrorPolling.from_bytes(encoded)
    assert parsed == table
    assert parsed.cpep_processor_structures == _processors()


def test_empty_table():
    table = _table(())
    parsed = CorrectedPlatformErrorPolling.from_bytes(table.to_bytes())
    assert parsed.cpep_processor_structures == ()


def test_trailing_bytes_beyond_length_ignored():
    table = _table()
    parsed = CorrectedPlatformErrorPolling.from_bytes(table.to_bytes() + b"\xff" * 8)
    assert parsed.cpep_processor_structures == _processors()


def test_partial_entry_is_dropped():
    header = SDTHeader(
        signature=b"CPEP", length=CorrectedPlatformErrorPolling.FIXED_SIZE + 4
    )
    raw = header.to_bytes() + b"\0" * 8 + b"\1\2\3\4"
    parsed = CorrectedPlatformErrorPolling.from_bytes(raw)
    assert parsed.cpep_processor_structures == ()


def test_length_below_fixed_size_raises():
    header = SDTHeader(signature=b"CPEP", length=SDT_HEADER_SIZE)
    with pytest.raises(AcpiError):
        CorrectedPlatformErrorPolling.from_bytes(header.to_bytes() + b"\0" * 8)


def test_data_shorter_than_length_raises():
    encoded = _table().to_bytes()
    with pytest.raises(AcpiError):
        CorrectedPlatformErrorPolling.from_bytes(encoded[:-1])