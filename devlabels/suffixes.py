# devlabels/suffixes.py
#
# Noise words dropped when shortening vendor and device names.
#
from __future__ import annotations
import bisect
from typing import Iterable, Iterator, Tuple


class MembershipSet:
    """Read-only sorted string set with bisect lookups."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = ()) -> None:
        object.__setattr__(self, "_items", tuple(sorted(set(items))))

    def __setattr__(self, name, value):
        raise AttributeError("MembershipSet is read-only")

    def __contains__(self, target: object) -> bool:
        if not isinstance(target, str):
            return False
        items: Tuple[str, ...] = self._items
        i = bisect.bisect_left(items, target)
        return i < len(items) and items[i] == target

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MembershipSet({list(self._items)!r})"


# fmt: off
PCI_VENDOR_SUFFIXES = MembershipSet([
    "Corporation", "Corp.", "Corp.,", "Corp", "corp.", "Co.", "Co", "co.", "co.,", "CO.,", "Co.,", "Co.,Ltd", "Co.,LTD.", "Co.,Ltd.",
    "INC.", "INC", "Inc.", "Inc", "Inc,", "inc.",
    "Ltd.", "Ltd", "LTD.", "ltd.",
    "Technologies", "Technologies,", "Technology", "Technology,",
    "Information",
    "Company",
    "Group",
    "LLC", "LLC.",
])

PCI_DEVICE_SUFFIXES = MembershipSet([
    "Processor",
    "Controller",
    "Adapter",
    "Integrated",
    "Technology",
    "Graphics",
    "Display",
    "PCI", "PCIe", "PCI-e", "PCI-to-PCI",
])

USB_VENDOR_SUFFIXES = MembershipSet([
    "Corporation", "Corp.", "Corp.,", "Corp", "corp.", "Co.", "Co", "co.", "co.,", "CO.,", "Co.,", "Co.,Ltd", "Co.,LTD.", "Co.,Ltd.",
    "INC.", "INC", "Inc.", "Inc", "Inc,", "inc.",
    "Ltd.", "Ltd", "LTD.", "ltd.",
    "Technologies", "Technologies,", "Technology", "Technology,",
    "Information",
    "Electronics", "ELECTRONICS", "Electric", "ELECTRIC",
    "Company",
    "Group",
    "LLC", "LLC.",
])
# fmt: on

NO_SUFFIXES = MembershipSet()
