# devlabels/backends/usb.py
from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, List

from ..errors import AttributeReadError, EnumerationError, InterfaceEnumerationError
from ..sysfs import AttributeReader, read_sysfs_file
from ..types import Bus, DeviceOutcome, DeviceRecord
from .base import BaseEnumerator

USB_DEVICES_SUBPATH = "bus/usb/devices"

DEVICE_ATTRS = ("class", "vendor", "device", "serial")

# USB sysfs file names are not very friendly; map them onto the PCI names.
USB_ATTR_FILES = {
    "class": "bDeviceClass",
    "device": "idProduct",
    "vendor": "idVendor",
    "serial": "serial",
}

# The USB tree also holds interfaces and hub ports; only real devices have this.
PROBE_ATTR = "idProduct"
INTERFACE_CLASS_ATTR = "bInterfaceClass"

# Device class meaning "defined per interface".
COMPOSITE_CLASS = "00"

USB_READER = AttributeReader(USB_ATTR_FILES)


class UsbEnumerator(BaseEnumerator):
    bus = Bus.USB
    subpath = USB_DEVICES_SUBPATH

    def device_paths(self) -> List[Path]:
        """Entries of the USB tree that carry a product ID, in name order."""
        try:
            with os.scandir(self.root) as it:
                names = sorted(entry.name for entry in it)
        except FileNotFoundError:
            # no USB host controller, nothing to match
            return []
        except OSError as e:
            raise EnumerationError(str(self.root), e) from e
        return [self.root / n for n in names if (self.root / n / PROBE_ATTR).is_file()]

    def read_device_attrs(self, dev_path: Path) -> Dict[str, str]:
        attrs: Dict[str, str] = {}
        for attr in DEVICE_ATTRS:
            try:
                val = USB_READER.read(dev_path, attr)
            except AttributeReadError:
                continue
            if val:
                attrs[attr] = val
        return attrs

    def interface_classes(self, dev_path: Path) -> List[str]:
        """Distinct interface classes below a composite device, first seen first."""
        classes: List[str] = []
        try:
            paths = sorted(dev_path.glob(f"*/{INTERFACE_CLASS_ATTR}"))
            for p in paths:
                klass = read_sysfs_file(p)
                if klass not in classes:
                    classes.append(klass)
        except (OSError, AttributeReadError) as e:
            raise InterfaceEnumerationError(str(dev_path), e) from e
        return classes

    def probe_device(self, dev_path: Path) -> DeviceOutcome:
        record = DeviceRecord(self.read_device_attrs(dev_path))

        if record.get("class") != COMPOSITE_CLASS:
            return DeviceOutcome(path=str(dev_path), records=(record,))

        # A device may expose several interfaces with mixed classes; emit one
        # record per class. No interfaces at all means no records.
        try:
            classes = self.interface_classes(dev_path)
        except InterfaceEnumerationError as e:
            return self._skipped(dev_path, e)
        return DeviceOutcome(
            path=str(dev_path),
            records=tuple(record.replace(**{"class": k}) for k in classes),
        )
