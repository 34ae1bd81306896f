# devlabels/types.py
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .errors import DevLabelsError


class Bus(str, Enum):
    PCI = "pci"
    USB = "usb"

    def __str__(self) -> str:
        return self.value


class DeviceRecord(Mapping):
    """
    Immutable mapping of attribute name -> attribute value for one device.

    Keys are bus specific (see `devlabels.backends.pci.MANDATORY_ATTRS` and
    `devlabels.backends.usb.DEVICE_ATTRS`); values are the stripped sysfs
    strings, e.g. ``{"class": "0300", "vendor": "10de", ...}``.
    """

    __slots__ = ("_attrs",)

    def __init__(self, attrs: Optional[Mapping] = None, **kwargs: str):
        merged: Dict[str, str] = dict(attrs or {})
        merged.update(kwargs)
        object.__setattr__(self, "_attrs", merged)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, key: str) -> str:
        return self._attrs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attrs)

    def __len__(self) -> int:
        return len(self._attrs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attrs!r})"

    def replace(self, **attrs: str) -> "DeviceRecord":
        """Return a copy with `attrs` set; the original is left untouched."""
        return DeviceRecord(self._attrs, **attrs)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._attrs)


@dataclass(frozen=True)
class DeviceSkip:
    """Why a device directory produced no records."""

    bus: Bus
    path: str
    error: DevLabelsError

    @property
    def reason(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class DeviceOutcome:
    """Result of probing one device directory: records, or a skip."""

    path: str
    records: Tuple[DeviceRecord, ...] = ()
    skip: Optional[DeviceSkip] = None

    @property
    def ok(self) -> bool:
        return self.skip is None


@dataclass
class ScanReport:
    bus: Bus
    records: List[DeviceRecord] = field(default_factory=list)
    skipped: List[DeviceSkip] = field(default_factory=list)


SkipObserver = Callable[[DeviceSkip], None]
