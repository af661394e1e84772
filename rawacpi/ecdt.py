"""Embedded Controller Boot Resources Table (ECDT)."""

import struct
from dataclasses import dataclass
from typing import ClassVar

from .common import (
    AcpiError,
    GenericAddressStructure,
    SDTHeader,
    _check_length,
    _pack,
)

_TAIL = struct.Struct("<IB")
_CONTROL_OFFSET = SDTHeader.SIZE
_DATA_OFFSET = _CONTROL_OFFSET + GenericAddressStructure.SIZE
_TAIL_OFFSET = _DATA_OFFSET + GenericAddressStructure.SIZE
_ID_OFFSET = _TAIL_OFFSET + _TAIL.size


@dataclass(frozen=True)
class EmbeddedControllerBootResourcesTable:
    """The ECDT: resources of the embedded controller and its namespace path.

    The header is written as given; its length is not recomputed.
    """

    header: SDTHeader
    ec_control: GenericAddressStructure = GenericAddressStructure()
    ec_data: GenericAddressStructure = GenericAddressStructure()
    uid: int = 0
    gpe_bit: int = 0
    ec_id: str = ""

    EC_ID_OFFSET: ClassVar[int] = _ID_OFFSET

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, _ID_OFFSET, "ECDT")
        header = SDTHeader.from_bytes(data)
        if header.length < _ID_OFFSET:
            raise AcpiError(
                f"ECDT length {header.length} is below the fixed size {_ID_OFFSET}"
            )
        _check_length(data, header.length, "ECDT")
        ec_control = GenericAddressStructure.from_bytes(data[_CONTROL_OFFSET:_DATA_OFFSET])
        ec_data = GenericAddressStructure.from_bytes(data[_DATA_OFFSET:_TAIL_OFFSET])
        uid, gpe_bit = _TAIL.unpack_from(data, _TAIL_OFFSET)
        raw_id = data[_ID_OFFSET : header.length]
        end = raw_id.find(b"\0")
        if end < 0:
            raise AcpiError("ECDT EC_ID is not null terminated")
        try:
            ec_id = raw_id[:end].decode("ascii")
        except UnicodeDecodeError as exc:
            raise AcpiError("ECDT EC_ID is not ASCII") from exc
        return cls(header, ec_control, ec_data, uid, gpe_bit, ec_id)

    def to_bytes(self):
        try:
            encoded_id = self.ec_id.encode("ascii")
        except UnicodeEncodeError as exc:
            raise AcpiError("ECDT EC_ID is not ASCII") from exc
        if b"\0" in encoded_id:
            raise AcpiError("ECDT EC_ID must not contain a null byte")
        return (
            self.header.to_bytes()
            + self.ec_control.to_bytes()
            + self.ec_data.to_bytes()
            + _pack(_TAIL, self.uid, self.gpe_bit)
            + encoded_id
            + b"\0"
        )