# tests/conftest.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest


def write_attr(d: Path, name: str, value: str) -> None:
    (d / name).write_text(f"{value}\n", encoding="ascii")


def make_pci_device_dir(
    real_root: Path,
    bdf: str,
    *,
    klass24: int,
    vendor: int,
    device: int,
    subvendor: int = 0x0000,
    subdevice: int = 0x0000,
    sriov_totalvfs: Optional[int] = None,
    omit: Iterable[str] = (),
) -> Path:
    d = real_root
    # nested fragments so the resolved path looks like /sys/devices/pci0000:00/...
    for frag in bdf.split("/"):
        d = d / frag
    d.mkdir(parents=True, exist_ok=True)
    values = {
        "class": f"0x{klass24:06x}",
        "vendor": f"0x{vendor:04x}",
        "device": f"0x{device:04x}",
        "subsystem_vendor": f"0x{subvendor:04x}",
        "subsystem_device": f"0x{subdevice:04x}",
    }
    if sriov_totalvfs is not None:
        values["sriov_totalvfs"] = str(sriov_totalvfs)
    for name, value in values.items():
        if name not in omit:
            write_attr(d, name, value)
    return d


def make_usb_device_dir(
    root: Path,
    name: str,
    *,
    attrs: Dict[str, str],
    interfaces: Optional[Dict[str, str]] = None,
) -> Path:
    """`attrs` uses sysfs file names; `interfaces` maps interface dir -> class."""
    d = root / name
    d.mkdir(parents=True, exist_ok=True)
    for fname, value in attrs.items():
        write_attr(d, fname, value)
    for iname, klass in (interfaces or {}).items():
        i = d / iname
        i.mkdir()
        write_attr(i, "bInterfaceClass", klass)
    return d


@pytest.fixture
def fake_pci_sysfs(tmp_path: Path) -> Path:
    """
    Fake /sys/bus/pci/devices: symlinks pointing at nested real directories,
    the way Linux lays them out under /sys/devices.
    """
    root = tmp_path / "sys" / "bus" / "pci" / "devices"
    real = tmp_path / "sys" / "devices" / "pci0000:00"
    root.mkdir(parents=True)
    real.mkdir(parents=True)

    bridge = make_pci_device_dir(
        real, "0000:00:01.0", klass24=0x060400, vendor=0x8086, device=0x2448
    )
    gpu = make_pci_device_dir(
        real,
        "0000:00:01.0/0000:65:00.0",
        klass24=0x030000,
        vendor=0x10DE,
        device=0x1DB6,
        subvendor=0x10DE,
        subdevice=0x1212,
    )
    nic = make_pci_device_dir(
        real,
        "0000:00:01.0/0000:66:00.0",
        klass24=0x020000,
        vendor=0x15B3,
        device=0x1017,
        subvendor=0x15B3,
        subdevice=0x0020,
        sriov_totalvfs=8,
    )
    # no subsystem_device: must be skipped without aborting the scan
    broken = make_pci_device_dir(
        real,
        "0000:00:01.0/0000:67:00.0",
        klass24=0x020000,
        vendor=0x8086,
        device=0x1572,
        omit=("subsystem_device",),
    )

    (root / "0000:00:01.0").symlink_to(bridge, target_is_directory=True)
    (root / "0000:65:00.0").symlink_to(gpu, target_is_directory=True)
    (root / "0000:66:00.0").symlink_to(nic, target_is_directory=True)
    (root / "0000:67:00.0").symlink_to(broken, target_is_directory=True)
    return root


@pytest.fixture
def fake_usb_sysfs(tmp_path: Path) -> Path:
    root = tmp_path / "sys" / "bus" / "usb" / "devices"
    root.mkdir(parents=True)

    # root hub: class declared at device level
    make_usb_device_dir(
        root,
        "usb1",
        attrs={"bDeviceClass": "09", "idVendor": "1d6b", "idProduct": "0003"},
        interfaces={"1-0:1.0": "09"},
    )
    # composite keyboard + mouse combo with an audio interface
    make_usb_device_dir(
        root,
        "1-1",
        attrs={
            "bDeviceClass": "00",
            "idVendor": "046d",
            "idProduct": "c52b",
            "serial": "ABC123",
        },
        interfaces={"1-1:1.0": "03", "1-1:1.1": "03", "1-1:1.2": "01"},
    )
    # class 00 with no interfaces below it
    make_usb_device_dir(
        root,
        "1-2",
        attrs={"bDeviceClass": "00", "idVendor": "0781", "idProduct": "5567"},
    )
    # no idProduct: not a device (e.g. an interface directory)
    (root / "1-0:1.0").mkdir()
    write_attr(root / "1-0:1.0", "bInterfaceClass", "09")
    return root
