# devlabels/backends/pci.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, List

from ..errors import AttributeReadError, EnumerationError, MandatoryAttributeError
from ..sysfs import AttributeReader
from ..types import Bus, DeviceOutcome, DeviceRecord
from .base import BaseEnumerator

PCI_DEVICES_SUBPATH = "bus/pci/devices"

MANDATORY_ATTRS = ("class", "vendor", "device", "subsystem_vendor", "subsystem_device")
OPTIONAL_ATTRS = ("sriov_totalvfs",)

# the class file holds 0xBBSSPP; the programming interface (PP) is dropped
PCI_READER = AttributeReader(strip_hex_prefix=True, truncate={"class": 4})


class PciEnumerator(BaseEnumerator):
    bus = Bus.PCI
    subpath = PCI_DEVICES_SUBPATH

    def device_paths(self) -> List[Path]:
        try:
            names = sorted(d.name for d in self.root.iterdir())
        except OSError as e:
            raise EnumerationError(str(self.root), e) from e
        return [self.root / name for name in names]

    def probe_device(self, dev_path: Path) -> DeviceOutcome:
        attrs: Dict[str, str] = {}
        for attr in MANDATORY_ATTRS:
            try:
                attrs[attr] = PCI_READER.read(dev_path, attr)
            except AttributeReadError as e:
                return self._skipped(dev_path, MandatoryAttributeError.from_read_error(e))

        for attr in OPTIONAL_ATTRS:
            try:
                attrs[attr] = PCI_READER.read(dev_path, attr)
            except AttributeReadError:
                pass

        return DeviceOutcome(path=str(dev_path), records=(DeviceRecord(attrs),))
