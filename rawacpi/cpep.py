"""Corrected Platform Error Polling Table (CPEP)."""

import struct
from dataclasses import dataclass
from typing import ClassVar

from .common import AcpiError, SDTHeader, _check_length, _pack

_PROCESSOR = struct.Struct("<BBBBI")
_RESERVED = struct.Struct("<Q")


@dataclass(frozen=True)
class CorrectedPlatformErrorPollingProcessor:
    """A processor that OSPM polls for corrected platform errors."""

    type: int = 0
    length: int = 8
    processor_id: int = 0
    processor_eid: int = 0
    polling_interval: int = 0

    SIZE: ClassVar[int] = _PROCESSOR.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "CPEP processor structure")
        return cls(*_PROCESSOR.unpack_from(data))

    def to_bytes(self):
        return _pack(
            _PROCESSOR,
            self.type,
            self.length,
            self.processor_id,
            self.processor_eid,
            self.polling_interval,
        )


@dataclass(frozen=True)
class CorrectedPlatformErrorPolling:
    """The CPEP table: a header followed by processor structures.

    The header is written as given; its length is not recomputed.
    """

    header: SDTHeader
    cpep_processor_structures: tuple = ()
    reserved: int = 0

    FIXED_SIZE: ClassVar[int] = SDTHeader.SIZE + _RESERVED.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.FIXED_SIZE, "CPEP")
        header = SDTHeader.from_bytes(data)
        if header.length < cls.FIXED_SIZE:
            raise AcpiError(
                f"CPEP length {header.length} is below the fixed size {cls.FIXED_SIZE}"
            )
        _check_length(data, header.length, "CPEP")
        (reserved,) = _RESERVED.unpack_from(data, SDTHeader.SIZE)
        entry = CorrectedPlatformErrorPollingProcessor.SIZE
        count = (header.length - cls.FIXED_SIZE) // entry
        processors = tuple(
            CorrectedPlatformErrorPollingProcessor.from_bytes(
                data[start : start + entry]
            )
            for start in range(cls.FIXED_SIZE, cls.FIXED_SIZE + count * entry, entry)
        )
        return cls(header, processors, reserved)

    def to_bytes(self):
        return (
            self.header.to_bytes()
            + _pack(_RESERVED, self.reserved)
            + b"".join(p.to_bytes() for p in self.cpep_processor_structures)
        )