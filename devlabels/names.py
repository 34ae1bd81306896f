# devlabels/names.py
"""
Shorten PCI-ID / USB-ID database strings into label-safe tokens.

    >>> readable_vendor("Advanced Micro Devices, Inc. [AMD/ATI]", "pci")
    'AMD-ATI'
    >>> readable_device("Mouse*in*a*Box Optical Pro", "usb")
    'Mouse-in-a-Box-Optical-Pro'

Both buses share one algorithm (`NameRules`); `PCI_RULES` and `USB_RULES`
hold the per-bus alphabets, limits and noise-word sets.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Union

from .suffixes import (
    NO_SUFFIXES,
    PCI_DEVICE_SUFFIXES,
    PCI_VENDOR_SUFFIXES,
    USB_VENDOR_SUFFIXES,
    MembershipSet,
)
from .types import Bus

WRONG_ID = "Wrong-ID"


def _delete(s: str, chars: str) -> str:
    for c in chars:
        s = s.replace(c, "")
    return s


def _dashify(s: str, chars: str) -> str:
    for c in chars:
        s = s.replace(c, "-")
    return s


@dataclass(frozen=True)
class NameRules:
    bus: Bus
    vendor_suffixes: MembershipSet
    device_suffixes: MembershipSet
    vendor_max_len: int
    device_max_len: int
    class_max_len: int = 0  # 0: no class shortening for this bus
    vendor_word_trim: str = ".,?"
    vendor_bracket_alias: bool = False
    vendor_edge_trim: str = "-/&"
    vendor_delete: str = ""
    device_bracket_extract: bool = False
    device_word_trim: str = "-/&()"
    device_delete: str = ""
    device_dash: str = "/&"

    def readable_class(self, s: str) -> str:
        if not self.class_max_len:
            raise ValueError(f"no readable class names for {self.bus} devices")
        words = s.split()
        if not words:
            return ""
        return words[0][: self.class_max_len]

    def readable_vendor(self, s: str) -> str:
        words = s.split()
        if not words:
            return ""

        last = words[-1]
        first = words[0].strip(self.vendor_word_trim)
        limit = self.vendor_max_len

        if last == "ID)":
            result = WRONG_ID
        elif self.vendor_bracket_alias and last.startswith("["):
            result = last[1:-1]
        elif len(first) > limit:
            result = first[:limit]
        elif len(words) == 1 or words[1] in self.vendor_suffixes:
            result = first
        else:
            second = words[1].strip(self.vendor_word_trim)
            result = f"{first}-{second}"[:limit]

        result = result.strip(self.vendor_edge_trim).replace("/", "-")
        return _delete(result, self.vendor_delete)

    def readable_device(self, s: str) -> str:
        if self.device_bracket_extract:
            s = _bracket_contents(s)

        kept = []
        for word in s.split():
            if word in self.device_suffixes:
                continue
            word = word.strip(self.device_word_trim)
            if word:
                kept.append(word)
        if not kept:
            return ""

        # every kept word carries its separator, so the length check below
        # counts a trailing dash
        result = _delete("".join(w + "-" for w in kept), self.device_delete)
        if len(result) > self.device_max_len:
            result = result[: self.device_max_len - 1]

        return _dashify(result, self.device_dash).strip("-")


def _bracket_contents(s: str) -> str:
    start = s.find("[")
    if start == -1:
        return s
    end = s.find("]", start + 1)
    if end == -1:
        return s[start + 1 :]
    return s[start + 1 : end]


# fmt: off
PCI_RULES = NameRules(
    bus                    = Bus.PCI,
    vendor_suffixes        = PCI_VENDOR_SUFFIXES,
    device_suffixes        = PCI_DEVICE_SUFFIXES,
    class_max_len          = 4,
    vendor_max_len         = 10,
    device_max_len         = 35,
    vendor_word_trim       = ".,?",
    vendor_bracket_alias   = True,
    vendor_edge_trim       = "-/&",
    device_bracket_extract = True,
    device_word_trim       = "-/&()",
    device_delete          = "()",
    device_dash            = "/&",
)

USB_RULES = NameRules(
    bus                    = Bus.USB,
    vendor_suffixes        = USB_VENDOR_SUFFIXES,
    device_suffixes        = NO_SUFFIXES,
    vendor_max_len         = 10,
    device_max_len         = 33,
    vendor_word_trim       = ".,?[]()",
    vendor_edge_trim       = "-/&+",
    vendor_delete          = ".",
    device_word_trim       = "-/&*+[]()~.,#®\"",
    device_dash            = "/&*+^\\()",
)
# fmt: on

_RULES: Dict[Bus, NameRules] = {Bus.PCI: PCI_RULES, Bus.USB: USB_RULES}


def rules_for(bus: Union[Bus, str]) -> NameRules:
    return _RULES[Bus(bus)]


def readable_class(s: str, bus: Union[Bus, str] = Bus.PCI) -> str:
    """First word of a class description, at most 4 characters (PCI only)."""
    return rules_for(bus).readable_class(s)


def readable_vendor(s: str, bus: Union[Bus, str]) -> str:
    return rules_for(bus).readable_vendor(s)


def readable_device(s: str, bus: Union[Bus, str]) -> str:
    return rules_for(bus).readable_device(s)
