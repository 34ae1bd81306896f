# devlabels/backends/base.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional

from ..errors import DevLabelsError
from ..sysfs import PathLike, sysfs_path
from ..types import Bus, DeviceOutcome, DeviceRecord, DeviceSkip, ScanReport, SkipObserver

log = logging.getLogger(__name__)


def log_skip(skip: DeviceSkip) -> None:
    """Default skip observer: report through the package logger."""
    log.error("skipping %s device %s: %s", skip.bus, skip.path, skip.reason)


class BaseEnumerator:
    """
    Walks the device directories of one bus in listing order.

    Subclasses provide `device_paths()` (raising EnumerationError when the
    tree cannot be listed) and `probe_device()`.
    """

    bus: Bus
    subpath: str  # relative to the sysfs mount point

    def __init__(
        self, root: Optional[PathLike] = None, observer: Optional[SkipObserver] = None
    ):
        self.root = Path(root) if root is not None else self.default_root()
        self.observer = observer if observer is not None else log_skip

    @classmethod
    def default_root(cls) -> Path:
        return sysfs_path(cls.subpath)

    def device_paths(self) -> List[Path]:
        raise NotImplementedError

    def probe_device(self, dev_path: Path) -> DeviceOutcome:
        raise NotImplementedError

    def _skipped(self, dev_path: Path, err: DevLabelsError) -> DeviceOutcome:
        return DeviceOutcome(
            path=str(dev_path), skip=DeviceSkip(self.bus, str(dev_path), err)
        )

    def scan_report(self) -> ScanReport:
        report = ScanReport(bus=self.bus)
        for dev_path in self.device_paths():
            outcome = self.probe_device(dev_path)
            if outcome.skip is not None:
                report.skipped.append(outcome.skip)
                self.observer(outcome.skip)
                continue
            report.records.extend(outcome.records)
        log.debug(
            "%s scan of %s: %d records, %d devices skipped",
            self.bus,
            self.root,
            len(report.records),
            len(report.skipped),
        )
        return report

    def scan(self) -> List[DeviceRecord]:
        return self.scan_report().records
