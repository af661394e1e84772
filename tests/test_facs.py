import pytest

from rawacpi.common import AcpiError
from rawacpi.facs import FACSFlags, FACSGlobalLock, FirmwareACPIControl, OEFACSFlags


def _raw():
    return (
        b"FACS"
        + (64).to_bytes(4, "little")
        + b"\x12\x34\x56\x78"
        + (0x9A000).to_bytes(4, "little")
        + (0b10).to_bytes(4, "little")
        + (0b11).to_bytes(4, "little")
        + (0x100000).to_bytes(8, "little")
        + bytes([2])
        + b"\0" * 3
        + (1).to_bytes(4, "little")
        + b"\0" * 24
    )


def test_size_matches_format():
    assert len(FirmwareACPIControl().to_bytes()) == 64


def test_facs_flags_bits():
    assert FACSFlags(0b01).s4bios_f()
    assert not FACSFlags(0b01).bit64_wake_supported_f()
    assert FACSFlags(0b10).bit64_wake_supported_f()
    assert not FACSFlags(0b10).s4bios_f()


def test_oefacs_flags_bit():
    assert OEFACSFlags(1).bit64_wake_f()
    assert not OEFACSFlags(0b10).bit64_wake_f()


def test_global_lock_bits():
    assert FACSGlobalLock(0b01).pending()
    assert not FACSGlobalLock(0b01).owned()
    assert FACSGlobalLock(0b10).owned()
    assert not FACSGlobalLock(0b10).pending()


def test_from_bytes_fields():
    facs = FirmwareACPIControl.from_bytes(_raw())
    assert facs.signature == b"FACS"
    assert facs.length == 64
    assert facs.hardware_signature == b"\x12\x34\x56\x78"
    assert facs.firmware_waking_vector == 0x9A000
    assert facs.x_firmware_waking_vector == 0x100000
    assert facs.version == 2
    assert facs.flags.s4bios_f() and facs.flags.bit64_wake_supported_f()
    assert facs.ospm_flags.bit64_wake_f()


def test_lock_reads_global_lock_word():
    facs = FirmwareACPIControl.from_bytes(_raw())
    assert facs.lock().owned()
    assert not facs.lock().pending()


def test_round_trip():
    raw = _raw()
    assert FirmwareACPIControl.from_bytes(raw).to_bytes() == raw


def test_default_round_trip():
    facs = FirmwareACPIControl(version=3, flags=FACSFlags(1))
    assert FirmwareACPIControl.from_bytes(facs.to_bytes()) == facs


def test_truncated_raises():
    with pytest.raises(AcpiError):
        FirmwareACPIControl.from_bytes(_raw()[:-1])


def test_out_of_range_field_raises():
    with pytest.raises(AcpiError):
        FirmwareACPIControl(version=256).to_bytes()