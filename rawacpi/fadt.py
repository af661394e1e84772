"""Fixed ACPI Description Table (FADT)."""

import struct
from dataclasses import dataclass
from typing import ClassVar

from .common import GenericAddressStructure, SDTHeader, _check_length, _pack
from .fadt_flags import FADTARMBootArch, FADTFixedFeatureFlags, FADTIAPCBootArch

_GAS_CODE = f"{GenericAddressStructure.SIZE}s"

# Body fields in table order, with their struct codes.
_FIELDS = (
    ("firmware_ctrl", "I"),
    ("dsdt", "I"),
    ("int_model", "B"),
    ("preferred_pm_profile", "B"),
    ("sci_int", "H"),
    ("smi_cmd", "I"),
    ("acpi_enable", "B"),
    ("acpi_disable", "B"),
    ("s4bios_req", "B"),
    ("pstate_cnt", "B"),
    ("pm1a_evt_blk", "I"),
    ("pm1b_evt_blk", "I"),
    ("pm1a_cnt_blk", "I"),
    ("pm1b_cnt_blk", "I"),
    ("pm2_cnt_blk", "I"),
    ("pm_tmr_blk", "I"),
    ("gpe0_blk", "I"),
    ("gpe1_blk", "I"),
    ("pm1_evt_len", "B"),
    ("pm1_cnt_len", "B"),
    ("pm2_cnt_len", "B"),
    ("pm_tmr_len", "B"),
    ("gpe0_blk_len", "B"),
    ("gpe1_blk_len", "B"),
    ("gpe1_base", "B"),
    ("cst_cnt", "B"),
    ("p_lvl2_lat", "H"),
    ("p_lvl3_lat", "H"),
    ("flush_size", "H"),
    ("flush_stride", "H"),
    ("duty_offset", "B"),
    ("duty_width", "B"),
    ("day_alrm", "B"),
    ("mon_alrm", "B"),
    ("century", "B"),
    ("iapc_boot_arch", "H"),
    ("reserved", "B"),
    ("flags", "I"),
    ("reset_reg", _GAS_CODE),
    ("reset_value", "B"),
    ("arm_boot_arch", "H"),
    ("minor_version", "B"),
    ("x_firmware_ctrl", "Q"),
    ("x_dsdt", "Q"),
    ("x_pm1a_evt_blk", _GAS_CODE),
    ("x_pm1b_evt_blk", _GAS_CODE),
    ("x_pm1a_cnt_blk", _GAS_CODE),
    ("x_pm1b_cnt_blk", _GAS_CODE),
    ("x_pm2_cnt_blk", _GAS_CODE),
    ("x_pm_tmr_blk", _GAS_CODE),
    ("x_gpe0_blk", _GAS_CODE),
    ("x_gpe1_blk", _GAS_CODE),
    ("sleep_control_reg", _GAS_CODE),
    ("sleep_status_reg", _GAS_CODE),
    ("hypervisor_vendor_identity", "Q"),
)

_BODY = struct.Struct("<" + "".join(code for _, code in _FIELDS))

_FLAG_TYPES = {
    "iapc_boot_arch": FADTIAPCBootArch,
    "flags": FADTFixedFeatureFlags,
    "arm_boot_arch": FADTARMBootArch,
}


def _decode(name, code, raw):
    if code == _GAS_CODE:
        return GenericAddressStructure.from_bytes(raw)
    flag_type = _FLAG_TYPES.get(name)
    return flag_type(raw) if flag_type else raw


def _encode(name, code, value):
    if code == _GAS_CODE:
        return value.to_bytes()
    if name in _FLAG_TYPES:
        return value.value
    return value


_GAS = GenericAddressStructure


@dataclass(frozen=True)
class FixedACPIDescriptionTable:
    """The FADT: fixed hardware ACPI information.

    The header is written as given; its length is not recomputed.
    """

    header: SDTHeader
    firmware_ctrl: int = 0
    dsdt: int = 0
    int_model: int = 0
    preferred_pm_profile: int = 0
    sci_int: int = 0
    smi_cmd: int = 0
    acpi_enable: int = 0
    acpi_disable: int = 0
    s4bios_req: int = 0
    pstate_cnt: int = 0
    pm1a_evt_blk: int = 0
    pm1b_evt_blk: int = 0
    pm1a_cnt_blk: int = 0
    pm1b_cnt_blk: int = 0
    pm2_cnt_blk: int = 0
    pm_tmr_blk: int = 0
    gpe0_blk: int = 0
    gpe1_blk: int = 0
    pm1_evt_len: int = 0
    pm1_cnt_len: int = 0
    pm2_cnt_len: int = 0
    pm_tmr_len: int = 0
    gpe0_blk_len: int = 0
    gpe1_blk_len: int = 0
    gpe1_base: int = 0
    cst_cnt: int = 0
    p_lvl2_lat: int = 0
    p_lvl3_lat: int = 0
    flush_size: int = 0
    flush_stride: int = 0
    duty_offset: int = 0
    duty_width: int = 0
    day_alrm: int = 0
    mon_alrm: int = 0
    century: int = 0
    iapc_boot_arch: FADTIAPCBootArch = FADTIAPCBootArch()
    flags: FADTFixedFeatureFlags = FADTFixedFeatureFlags()
    reset_reg: GenericAddressStructure = _GAS()
    reset_value: int = 0
    arm_boot_arch: FADTARMBootArch = FADTARMBootArch()
    minor_version: int = 0
    x_firmware_ctrl: int = 0
    x_dsdt: int = 0
    x_pm1a_evt_blk: GenericAddressStructure = _GAS()
    x_pm1b_evt_blk: GenericAddressStructure = _GAS()
    x_pm1a_cnt_blk: GenericAddressStructure = _GAS()
    x_pm1b_cnt_blk: GenericAddressStructure = _GAS()
    x_pm2_cnt_blk: GenericAddressStructure = _GAS()
    x_pm_tmr_blk: GenericAddressStructure = _GAS()
    x_gpe0_blk: GenericAddressStructure = _GAS()
    x_gpe1_blk: GenericAddressStructure = _GAS()
    sleep_control_reg: GenericAddressStructure = _GAS()
    sleep_status_reg: GenericAddressStructure = _GAS()
    hypervisor_vendor_identity: int = 0
    reserved: int = 0

    SIZE: ClassVar[int] = SDTHeader.SIZE + _BODY.size

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        _check_length(data, cls.SIZE, "FADT")
        header = SDTHeader.from_bytes(data)
        raw_values = _BODY.unpack_from(data, SDTHeader.SIZE)
        fields = {
            name: _decode(name, code, raw)
            for (name, code), raw in zip(_FIELDS, raw_values)
        }
        return cls(header=header, **fields)

    def to_bytes(self):
        values = (_encode(name, code, getattr(self, name)) for name, code in _FIELDS)
        return self.header.to_bytes() + _pack(_BODY, *values)