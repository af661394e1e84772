"""Firmware ACPI Control Structure (FACS) and its flag fields."""

import struct
from dataclasses import dataclass
from typing import ClassVar

from .common import _check_length, _pack

_FACS = struct.Struct("<4sI4sIIIQB3sI24s")


@dataclass(frozen=True)
class FACSFlags:
    """Firmware control structure feature flags."""

    value: int = 0

    def s4bios_f(self):
        """Whether the platform supports S4BIOS_REQ."""
        return bool(self.value & 0b01)

    def bit64_wake_supported_f(self):
        """Whether firmware supports a 64-bit waking environment."""
        return bool(self.value & 0b10)


@dataclass(frozen=True)
class OEFACSFlags:
    """OSPM-enabled firmware control structure flags."""

    value: int = 0

    def bit64_wake_f(self):
        """Whether OSPM asks for a 64-bit waking environment."""
        return bool(self.value & 0b1)


@dataclass(frozen=True)
class FACSGlobalLock:
    """The Global Lock word held in the FACS."""

    value: int = 0

    def pending(self):
        """Whether a request for ownership of the lock is pending."""
        return bool(self.value & 0b01)

    def owned(self):
        """Whether the lock is owned."""
        return bool(self.value & 0b10)


@dataclass(frozen=True)
class FirmwareACPIControl:
    """The FACS, which has its own header rather than an SDT header."""

    signature: bytes = b"FACS"
    length: int = 64
    hardware_signature: bytes = b"\0" * 4
    firmware_waking_vector: int = 0
    global_lock: int = 0
    flags: FACSFlags = FACSFlags()
    x_firmware_waking_vector: int = 0
    version: int = 0
    ospm_flags: OEFACSFlags = OEFACSFlags()
    reserved1: bytes = b"\0" * 3
    reserved2: bytes = b"\0" * 24

    SIZE: ClassVar[int] = _FACS.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "FACS")
        (
            signature,
            length,
            hardware_signature,
            waking_vector,
            global_lock,
            flags,
            x_waking_vector,
            version,
            reserved1,
            ospm_flags,
            reserved2,
        ) = _FACS.unpack_from(data)
        return cls(
            signature=signature,
            length=length,
            hardware_signature=hardware_signature,
            firmware_waking_vector=waking_vector,
            global_lock=global_lock,
            flags=FACSFlags(flags),
            x_firmware_waking_vector=x_waking_vector,
            version=version,
            ospm_flags=OEFACSFlags(ospm_flags),
            reserved1=reserved1,
            reserved2=reserved2,
        )

    def to_bytes(self):
        return _pack(
            _FACS,
            bytes(self.signature),
            self.length,
            bytes(self.hardware_signature),
            self.firmware_waking_vector,
            self.global_lock,
            self.flags.value,
            self.x_firmware_waking_vector,
            self.version,
            bytes(self.reserved1),
            self.ospm_flags.value,
            bytes(self.reserved2),
        )

    def lock(self):
        """Return the Global Lock word as a FACSGlobalLock."""
        return FACSGlobalLock(self.global_lock)