import pytest

from rawacpi.common import (
    SDT_HEADER_SIZE,
    AcpiError,
    GenericAddressStructure,
    SDTHeader,
)


def _header_bytes():
    return (
        b"APIC"
        + (100).to_bytes(4, "little")
        + bytes([3, 0x5A])
        + b"OEMID1"
        + b"TABLEID1"
        + (7).to_bytes(4, "little")
        + (0x4C544E49).to_bytes(4, "little")
        + (0x20200925).to_bytes(4, "little")
    )


def test_header_size_matches_format():
    encoded = SDTHeader(signature=b"APIC").to_bytes()
    assert len(encoded) == 36
    assert len(encoded) == SDT_HEADER_SIZE


def test_header_from_bytes_fields():
    header = SDTHeader.from_bytes(_header_bytes())
    assert header.signature == b"APIC"
    assert header.length == 100
    assert header.revision == 3
    assert header.checksum == 0x5A
    assert header.oemid == b"OEMID1"
    assert header.oem_table_id == b"TABLEID1"
    assert header.oem_revision == 7
    assert header.creator_id == 0x4C544E49
    assert header.creator_revision == 0x20200925


def test_header_round_trip():
    raw = _header_bytes()
    assert SDTHeader.from_bytes(raw).to_bytes() == raw


def test_header_accepts_bytearray_and_ignores_trailing():
    raw = bytearray(_header_bytes() + b"extra")
    header = SDTHeader.from_bytes(raw)
    assert header.to_bytes() == bytes(raw[:SDT_HEADER_SIZE])


def test_header_truncated_raises():
    with pytest.raises(AcpiError):
        SDTHeader.from_bytes(_header_bytes()[:-1])


def test_header_bad_signature_raises():
    with pytest.raises(AcpiError):
        SDTHeader(signature=b"API")


def test_header_out_of_range_length_raises():
    header = SDTHeader(signature=b"DSDT", length=1 << 32)
    with pytest.raises(AcpiError):
        header.to_bytes()


def test_gas_size_matches_format():
    assert len(GenericAddressStructure().to_bytes()) == 12


def test_gas_from_bytes_fields():
    raw = bytes([1, 8, 0, 1]) + (0xCF9).to_bytes(8, "little")
    gas = GenericAddressStructure.from_bytes(raw)
    assert gas == GenericAddressStructure(1, 8, 0, 1, 0xCF9)
    assert gas.to_bytes() == raw


def test_gas_round_trip():
    gas = GenericAddressStructure(0, 32, 4, 3, 0xFED00000)
    encoded = gas.to_bytes()
    assert len(encoded) == GenericAddressStructure.SIZE
    assert GenericAddressStructure.from_bytes(encoded) == gas


def test_gas_truncated_raises():
    with pytest.raises(AcpiError):
        GenericAddressStructure.from_bytes(b"\0" * 11)


def test_gas_out_of_range_raises():
    with pytest.raises(AcpiError):
        GenericAddressStructure(address_space_id=256).to_bytes()