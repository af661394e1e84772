"""Structures shared by all ACPI system description tables."""

import struct
from dataclasses import dataclass
from typing import ClassVar


class AcpiError(ValueError):
    """Raised when table bytes are truncated, malformed or cannot be encoded."""


def _check_length(data, size, what):
    if len(data) < size:
        raise AcpiError(f"{what} needs at least {size} bytes, got {len(data)}")


def _pack(layout, *values):
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise AcpiError(str(exc)) from exc


_GAS = struct.Struct("<BBBBQ")
_HEADER = struct.Struct("<4sIBB6s8sIII")

SDT_HEADER_SIZE = _HEADER.size


@dataclass(frozen=True)
class GenericAddressStructure:
    """Describes the location of a register or data structure (GAS)."""

    address_space_id: int = 0
    reg_bit_width: int = 0
    reg_bit_offset: int = 0
    access_size: int = 0
    address: int = 0

    SIZE: ClassVar[int] = _GAS.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "Generic Address Structure")
        return cls(*_GAS.unpack_from(data))

    def to_bytes(self):
        return _pack(
            _GAS,
            self.address_space_id,
            self.reg_bit_width,
            self.reg_bit_offset,
            self.access_size,
            self.address,
        )


@dataclass(frozen=True)
class SDTHeader:
    """The header every system description table starts with."""

    signature: bytes
    length: int = 0
    revision: int = 0
    checksum: int = 0
    oemid: bytes = b"\0" * 6
    oem_table_id: bytes = b"\0" * 8
    oem_revision: int = 0
    creator_id: int = 0
    creator_revision: int = 0

    SIZE: ClassVar[int] = _HEADER.size

    def __post_init__(self):
        for name, size in (("signature", 4), ("oemid", 6), ("oem_table_id", 8)):
            value = getattr(self, name)
            if not isinstance(value, (bytes, bytearray)) or len(value) != size:
                raise AcpiError(f"{name} must be exactly {size} bytes")

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "SDT header")
        return cls(*_HEADER.unpack_from(data))

    def to_bytes(self):
        return _pack(
            _HEADER,
            bytes(self.signature),
            self.length,
            self.revision,
            self.checksum,
            bytes(self.oemid),
            bytes(self.oem_table_id),
            self.oem_revision,
            self.creator_id,
            self.creator_revision,
        )