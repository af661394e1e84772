# rawacpi

Read and write ACPI system description tables as plain Python objects.

Every structure is a frozen dataclass. `from_bytes` reads it from
little-endian bytes and `to_bytes` writes it back. Input that is too short or
malformed, and values that cannot be encoded, raise `AcpiError` (a subclass of
`ValueError`).

## Install

    pip install rawacpi

## Modules

- `rawacpi.common`: `SDTHeader`, `GenericAddressStructure`, `AcpiError`
- `rawacpi.bgrt`: `BootGraphicsResourceTable`
- `rawacpi.cpep`: `CorrectedPlatformErrorPolling`,
  `CorrectedPlatformErrorPollingProcessor`
- `rawacpi.dsdt`: `DifferentiatedSystemDescriptionTable` (header plus the raw
  AML definition block as `bytes`)
- `rawacpi.ecdt`: `EmbeddedControllerBootResourcesTable` (the `ec_id` path is
  an ASCII `str`, written back null terminated)
- `rawacpi.facs`: `FirmwareACPIControl`, `FACSFlags`, `OEFACSFlags`,
  `FACSGlobalLock`
- `rawacpi.fadt`: `FixedACPIDescriptionTable`
- `rawacpi.fadt_flags`: `FADTFixedFeatureFlags`, `FADTIAPCBootArch`,
  `FADTARMBootArch`, `FADTPersistentCPUCacheFeature`
- `rawacpi.msct`: `MaximumSystemCharacteristicsTable`,
  `MaximumProximityDomainInformation`
- `rawacpi.madt.wakeup`: `MultiprocessorWakeup`,
  `MultiprocessorWakeupMailbox`

## Example

```python
from rawacpi.fadt import FixedACPIDescriptionTable

with open("FACP.bin", "rb") as fh:
    fadt = FixedACPIDescriptionTable.from_bytes(fh.read())

print(fadt.header.signature, fadt.header.revision)
print(fadt.flags.hw_reduced_acpi(), fadt.flags.persistent_cpu_caches())
print(fadt.iapc_boot_arch.keyboard_8042(), hex(fadt.x_dsdt))
```

Flag fields are small wrappers around the raw integer, kept in `value`. Each
flag is a method that returns a `bool`, or an enum member where the field holds
more than one bit. `FADTFixedFeatureFlags.persistent_cpu_caches()` raises
`AcpiError` for the reserved value `0b11`. `FirmwareACPIControl.lock()` returns
the Global Lock word as a `FACSGlobalLock`.

## Writing tables

`to_bytes` writes each header exactly as it is held: the `length` and
`checksum` fields are not recomputed, so set them yourself when building a
table. `MaximumSystemCharacteristicsTable.to_bytes` zero-fills any gap between
its fixed part and the offset of its proximity domain entries.

## What it does not do

- It does not parse a whole Multiple APIC Description Table. Of its interrupt
  controller entries only the multiprocessor wakeup structure and its mailbox
  are provided.
- It does not read tables from a running system or from physical memory; it
  works on bytes you supply.
- It does not verify checksums or signatures.

## Tests

    pip install rawacpi[test]
    pytest