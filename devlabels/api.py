from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Type, Union

from .backends import BaseEnumerator, PciEnumerator, UsbEnumerator
from .names import rules_for
from .sysfs import PathLike, sysfs_root
from .types import Bus, DeviceRecord, SkipObserver

ENUMERATORS: Dict[Bus, Type[BaseEnumerator]] = {
    Bus.PCI: PciEnumerator,
    Bus.USB: UsbEnumerator,
}


def discover(
    root: Optional[PathLike] = None, observer: Optional[SkipObserver] = None
) -> Dict[Bus, List[DeviceRecord]]:
    """Scan every supported bus below the sysfs mount point `root`."""
    base = Path(root) if root is not None else sysfs_root()
    return {
        bus: cls(base / cls.subpath, observer=observer).scan()
        for bus, cls in ENUMERATORS.items()
    }


def readable_names(names: Mapping[str, str], bus: Union[Bus, str]) -> Dict[str, str]:
    """
    Shorten the raw `class`/`vendor`/`device` strings in `names` for `bus`.
    Keys missing from `names` are missing from the result. USB classes are
    numeric codes, so a USB `class` entry is left out.
    """
    rules = rules_for(bus)
    out: Dict[str, str] = {}
    if "class" in names and rules.class_max_len:
        out["class"] = rules.readable_class(names["class"])
    if "vendor" in names:
        out["vendor"] = rules.readable_vendor(names["vendor"])
    if "device" in names:
        out["device"] = rules.readable_device(names["device"])
    return out


__all__ = ["discover", "readable_names"]
