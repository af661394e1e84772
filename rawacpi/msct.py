"""Maximum System Characteristics Table (MSCT)."""

import struct
from dataclasses import dataclass
from typing import ClassVar

from .common import AcpiError, SDTHeader, _check_length, _pack

_DOMAIN = struct.Struct("<BBIIIQ")
_FIXED = struct.Struct("<IIIQ")


@dataclass(frozen=True)
class MaximumProximityDomainInformation:
    """Maximum characteristics of a range of proximity domains."""

    revision: int = 1
    length: int = 22
    proximity_domain_range_low: int = 0
    proximity_domain_range_high: int = 0
    max_processor_capacity: int = 0
    max_memory_capacity: int = 0

    SIZE: ClassVar[int] = _DOMAIN.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "Maximum Proximity Domain Information")
        return cls(*_DOMAIN.unpack_from(data))

    def to_bytes(self):
        return _pack(
            _DOMAIN,
            self.revision,
            self.length,
            self.proximity_domain_range_low,
            self.proximity_domain_range_high,
            self.max_processor_capacity,
            self.max_memory_capacity,
        )


@dataclass(frozen=True)
class MaximumSystemCharacteristicsTable:
    """The MSCT with the proximity domain entries found at its offset field.

    The header is written as given; its length is not recomputed. When
    writing, the gap between the fixed part and the entries is zero-filled.
    """

    header: SDTHeader
    offset_prox_dom_info: int = SDTHeader.SIZE + _FIXED.size
    max_number_of_proximity_domains: int = 0
    max_number_of_clock_domains: int = 0
    max_physical_address: int = 0
    proximity_domain_information: tuple = ()

    FIXED_SIZE: ClassVar[int] = SDTHeader.SIZE + _FIXED.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.FIXED_SIZE, "MSCT")
        header = SDTHeader.from_bytes(data)
        _check_length(data, header.length, "MSCT")
        offset, max_domains, max_clocks, max_address = _FIXED.unpack_from(
            data, SDTHeader.SIZE
        )
        if offset > header.length:
            raise AcpiError(
                f"MSCT proximity domain offset {offset} is beyond table length "
                f"{header.length}"
            )
        entry = MaximumProximityDomainInformation.SIZE
        count = (header.length - offset) // entry
        domains = tuple(
            MaximumProximityDomainInformation.from_bytes(data[start : start + entry])
            for start in range(offset, offset + count * entry, entry)
        )
        return cls(header, offset, max_domains, max_clocks, max_address, domains)

    def to_bytes(self):
        if self.offset_prox_dom_info < self.FIXED_SIZE:
            raise AcpiError(
                f"MSCT proximity domain offset {self.offset_prox_dom_info} overlaps "
                f"the fixed part of {self.FIXED_SIZE} bytes"
            )
        fixed = self.header.to_bytes() + _pack(
            _FIXED,
            self.offset_prox_dom_info,
            self.max_number_of_proximity_domains,
            self.max_number_of_clock_domains,
            self.max_physical_address,
        )
        padding = b"\0" * (self.offset_prox_dom_info - len(fixed))
        return (
            fixed
            + padding
            + b"".join(d.to_bytes() for d in self.proximity_domain_information)
        )