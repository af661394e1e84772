"""Differentiated System Description Table (DSDT)."""

from dataclasses import dataclass

from .common import AcpiError, SDTHeader, _check_length


@dataclass(frozen=True)
class DifferentiatedSystemDescriptionTable:
    """The DSDT: a header followed by an AML definition block.

    The header is written as given; its length is not recomputed.
    """

    header: SDTHeader
    def_block: bytes = b""

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, SDTHeader.SIZE, "DSDT")
        header = SDTHeader.from_bytes(data)
        if header.length < SDTHeader.SIZE:
            raise AcpiError(
                f"DSDT length {header.length} is below the header size {SDTHeader.SIZE}"
            )
        _check_length(data, header.length, "DSDT")
        return cls(header, data[SDTHeader.SIZE : header.length])

    def to_bytes(self):
        return self.header.to_bytes() + bytes(self.def_block)