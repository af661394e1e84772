"""Boot Graphics Resource Table (BGRT)."""

import struct
from dataclasses import dataclass
from typing import ClassVar

from .common import SDTHeader, _check_length, _pack

_BODY = struct.Struct("<HBBQII")


@dataclass(frozen=True)
class BootGraphicsResourceTable:
    """Describes the image drawn on screen during boot."""

    header: SDTHeader
    version: int = 1
    status: int = 0
    image_type: int = 0
    image_address: int = 0
    image_offset_x: int = 0
    image_offset_y: int = 0

    SIZE: ClassVar[int] = SDTHeader.SIZE + _BODY.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "BGRT")
        header = SDTHeader.from_bytes(data)
        return cls(header, *_BODY.unpack_from(data, SDTHeader.SIZE))

    def to_bytes(self):
        return self.header.to_bytes() + _pack(
            _BODY,
            self.version,
            self.status,
            self.image_type,
            self.image_address,
            self.image_offset_x,
            self.image_offset_y,
        )