"""
devlabels: PCI/USB device discovery from sysfs + label-safe device names.

Public API:
    - Discovery:
        discover, PciEnumerator, UsbEnumerator
    - Records and scan results:
        Bus, DeviceRecord, DeviceSkip, DeviceOutcome, ScanReport
    - Readable names:
        readable_class, readable_vendor, readable_device, readable_names,
        NameRules, PCI_RULES, USB_RULES
    - Errors:
        DevLabelsError, EnumerationError, AttributeReadError,
        MandatoryAttributeError, InterfaceEnumerationError
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("devlabels")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0.dev0"

# Public API re-exports
from .api import discover, readable_names
from .backends import PciEnumerator, UsbEnumerator
from .errors import (
    AttributeReadError,
    DevLabelsError,
    EnumerationError,
    InterfaceEnumerationError,
    MandatoryAttributeError,
)
from .names import (
    PCI_RULES,
    USB_RULES,
    NameRules,
    readable_class,
    readable_device,
    readable_vendor,
)
from .types import Bus, DeviceOutcome, DeviceRecord, DeviceSkip, ScanReport

__all__ = [
    "__version__",
    # Discovery
    "discover",
    "PciEnumerator",
    "UsbEnumerator",
    # Records
    "Bus",
    "DeviceRecord",
    "DeviceSkip",
    "DeviceOutcome",
    "ScanReport",
    # Names
    "readable_class",
    "readable_vendor",
    "readable_device",
    "readable_names",
    "NameRules",
    "PCI_RULES",
    "USB_RULES",
    # Errors
    "DevLabelsError",
    "EnumerationError",
    "AttributeReadError",
    "MandatoryAttributeError",
    "InterfaceEnumerationError",
]
