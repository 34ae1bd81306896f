"""
Per-bus sysfs enumerators.

`PciEnumerator` and `UsbEnumerator` share the scan loop in `base`; the
top-level `devlabels.discover` drives both.
"""

from __future__ import annotations

from .base import BaseEnumerator, log_skip
from .pci import PciEnumerator
from .usb import UsbEnumerator

__all__ = ["BaseEnumerator", "PciEnumerator", "UsbEnumerator", "log_skip"]
