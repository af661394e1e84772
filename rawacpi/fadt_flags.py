"""Flag fields of the Fixed ACPI Description Table (FADT)."""

from dataclasses import dataclass
from enum import Enum

from .common import AcpiError


class FADTPersistentCPUCacheFeature(Enum):
    """Whether CPU caches are reported as persistent (bits 22-23 of FADT flags)."""

    NOT_REPORTED = 0b00
    NOT_PERSISTENT = 0b01
    PERSISTENT = 0b10


@dataclass(frozen=True)
class FADTFixedFeatureFlags:
    """Fixed feature flags of the FADT."""

    value: int = 0

    def _bit(self, position):
        return bool(self.value & (1 << position))

    def wbinvd(self):
        """Whether the processor correctly implements WBINVD."""
        return self._bit(0)

    def wbinvd_flush(self):
        """Whether WBINVD flushes caches without guaranteeing invalidation."""
        return self._bit(1)

    def proc_c1(self):
        """Whether the C1 power state is supported on all processors."""
        return self._bit(2)

    def p_lvl2_up(self):
        """Whether the C2 power state works on multiprocessor systems."""
        return self._bit(3)

    def pwr_button(self):
        """Whether the power button is a control method device."""
        return self._bit(4)

    def slp_button(self):
        """Whether the sleep button is a control method device."""
        return self._bit(5)

    def fix_rtc(self):
        """Whether RTC wake status is not in fixed register space."""
        return self._bit(6)

    def rtc_s4(self):
        """Whether the RTC alarm can wake the system from S4."""
        return self._bit(7)

    def tmr_val_ext(self):
        """Whether TMR_VAL is 32 bits wide rather than 24."""
        return self._bit(8)

    def dck_cap(self):
        """Whether the system can support docking."""
        return self._bit(9)

    def reset_reg_sup(self):
        """Whether system reset through RESET_REG is supported."""
        return self._bit(10)

    def sealed_case(self):
        """Whether the case is sealed with no internal expansion."""
        return self._bit(11)

    def headless(self):
        """Whether the system cannot detect monitor or keyboard/mouse."""
        return self._bit(12)

    def cpu_sw_slp(self):
        """Whether a native instruction must follow writing SLP_TYPx."""
        return self._bit(13)

    def pci_exp_wak(self):
        """Whether the PCIEXP_WAKE status and enable bits are supported."""
        return self._bit(14)

    def use_platform_clock(self):
        """Whether OSPM should use a platform timer for monotonic counters."""
        return self._bit(15)

    def s4_rtc_sts_valid(self):
        """Whether RTC_STS is valid when waking from S4."""
        return self._bit(16)

    def remote_power_on_capable(self):
        """Whether the platform supports remote power-on from S5."""
        return self._bit(17)

    def force_apic_cluster_model(self):
        """Whether local APICs must use the cluster destination model."""
        return self._bit(18)

    def force_apic_physical_destination_mode(self):
        """Whether local xAPICs must use physical destination mode."""
        return self._bit(19)

    def hw_reduced_acpi(self):
        """Whether Hardware-Reduced ACPI is implemented."""
        return self._bit(20)

    def low_power_s0_idle_capable(self):
        """Whether S0 idle saves as much power as S3."""
        return self._bit(21)

    def persistent_cpu_caches(self):
        """Decode bits 22-23; the reserved value 0b11 raises AcpiError."""
        field = (self.value >> 22) & 0b11
        if field == 0b11:
            raise AcpiError(
                "FADT persistent CPU cache field set to 0b11, which is a reserved value"
            )
        return FADTPersistentCPUCacheFeature(field)


@dataclass(frozen=True)
class FADTIAPCBootArch:
    """IA-PC boot architecture flags."""

    value: int = 0

    def legacy_devices(self):
        """Whether user-visible devices exist on the LPC or ISA bus."""
        return bool(self.value & 0b000001)

    def keyboard_8042(self):
        """Whether a port 60/64 keyboard controller is present."""
        return bool(self.value & 0b000010)

    def vga_not_present(self):
        """Whether VGA hardware must not be probed."""
        return bool(self.value & 0b000100)

    def msi_not_supported(self):
        """Whether MSI must not be enabled."""
        return bool(self.value & 0b001000)

    def pcie_aspm_controls(self):
        """Whether OSPM ASPM control must not be enabled."""
        return bool(self.value & 0b010000)

    def cmos_rtc_not_present(self):
        """Whether the CMOS RTC is absent from the legacy addresses."""
        return bool(self.value & 0b100000)


@dataclass(frozen=True)
class FADTARMBootArch:
    """ARM architecture boot flags."""

    value: int = 0

    def psci_compliant(self):
        """Whether PSCI is implemented."""
        return bool(self.value & 0b01)

    def psci_use_hvc(self):
        """Whether HVC is the PSCI conduit; reads bit 0 like psci_compliant."""
        return bool(self.value & 0b01)