# devlabels/sysfs.py
from __future__ import annotations
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from .errors import AttributeReadError

SYSFS_ROOT_DEFAULT = "/sys"
SYSFS_ROOT_ENV = "DEVLABELS_SYSFS_ROOT"

PathLike = Union[str, "os.PathLike[str]"]


def sysfs_root() -> Path:
    """Mount point of sysfs; `DEVLABELS_SYSFS_ROOT` overrides /sys (e.g. /host-sys)."""
    return Path(os.getenv(SYSFS_ROOT_ENV) or SYSFS_ROOT_DEFAULT)


def sysfs_path(*parts: str) -> Path:
    return sysfs_root().joinpath(*parts)


def read_sysfs_file(path: PathLike, attribute: Optional[str] = None) -> str:
    """
    Read one sysfs attribute file and return its whitespace-stripped content.
    Raises AttributeReadError (chained to the OSError) if it cannot be read.
    """
    p = Path(path)
    name = attribute or p.name
    try:
        data = p.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise AttributeReadError(name, str(p), e) from e
    return data.strip()


class AttributeReader:
    """
    Maps logical attribute names to sysfs file names for one bus.

    `file_map` entries not present fall back to the logical name itself.
    """

    def __init__(
        self,
        file_map: Optional[Mapping[str, str]] = None,
        *,
        strip_hex_prefix: bool = False,
        truncate: Optional[Mapping[str, int]] = None,
    ):
        self.file_map = dict(file_map or {})
        self.strip_hex_prefix = strip_hex_prefix
        self.truncate = dict(truncate or {})

    def filename(self, attribute: str) -> str:
        return self.file_map.get(attribute, attribute)

    def read(self, dev_path: PathLike, attribute: str) -> str:
        val = read_sysfs_file(Path(dev_path) / self.filename(attribute), attribute)
        if self.strip_hex_prefix and val.startswith("0x"):
            val = val[2:]
        limit = self.truncate.get(attribute)
        if limit is not None and len(val) > limit:
            val = val[:limit]
        return val
