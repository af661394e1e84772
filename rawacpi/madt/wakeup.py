"""Multiprocessor Wakeup structure and its shared mailbox."""

import struct
from dataclasses import dataclass
from typing import ClassVar

from ..common import AcpiError, _check_length, _pack

_OS_AREA = 2032
_FIRMWARE_AREA = 2048
_MAILBOX = struct.Struct(f"<HHIQ{_OS_AREA}s{_FIRMWARE_AREA}s")
_WAKEUP = struct.Struct("<BBHIQ")


@dataclass(frozen=True)
class MultiprocessorWakeupMailbox:
    """The 4 KiB mailbox used to wake application processors.

    Command 0 is Noop and command 1 is Wakeup; other values are reserved.
    """

    command: int = 0
    reserved: int = 0
    apic_id: int = 0
    wakeup_vector: int = 0
    reserved_os: bytes = b"\0" * _OS_AREA
    reserved_firmware: bytes = b"\0" * _FIRMWARE_AREA

    SIZE: ClassVar[int] = _MAILBOX.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "Multiprocessor Wakeup mailbox")
        return cls(*_MAILBOX.unpack_from(data))

    def to_bytes(self):
        for name, size in (
            ("reserved_os", _OS_AREA),
            ("reserved_firmware", _FIRMWARE_AREA),
        ):
            if len(getattr(self, name)) != size:
                raise AcpiError(f"{name} must be exactly {size} bytes")
        return _pack(
            _MAILBOX,
            self.command,
            self.reserved,
            self.apic_id,
            self.wakeup_vector,
            bytes(self.reserved_os),
            bytes(self.reserved_firmware),
        )


@dataclass(frozen=True)
class MultiprocessorWakeup:
    """Points the OS at the mailbox used to wake application processors."""

    type: int = 16
    length: int = 16
    mailbox_version: int = 0
    reserved: int = 0
    mailbox_address: int = 0

    SIZE: ClassVar[int] = _WAKEUP.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "Multiprocessor Wakeup structure")
        return cls(*_WAKEUP.unpack_from(data))

    def to_bytes(self):
        return _pack(
            _WAKEUP,
            self.type,
            self.length,
            self.mailbox_version,
            self.reserved,
            self.mailbox_address,
        )