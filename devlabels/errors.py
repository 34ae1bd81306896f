# devlabels/errors.py
from __future__ import annotations
from typing import Optional


class DevLabelsError(Exception):
    """Base class for everything raised by devlabels."""


class EnumerationError(DevLabelsError):
    """The top-level device directory of a bus could not be listed."""

    def __init__(self, path: str, reason: Optional[BaseException] = None):
        self.path = path
        self.reason = reason
        msg = f"failed to enumerate devices under {path}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


class AttributeReadError(DevLabelsError):
    """A single device attribute file could not be opened or read."""

    def __init__(self, attribute: str, path: str, reason: Optional[BaseException] = None):
        self.attribute = attribute
        self.path = path
        self.reason = reason
        msg = f"failed to read device attribute {attribute}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


class MandatoryAttributeError(AttributeReadError):
    @classmethod
    def from_read_error(cls, err: AttributeReadError) -> "MandatoryAttributeError":
        return cls(err.attribute, err.path, err.reason)


class InterfaceEnumerationError(DevLabelsError):
    """The interface classes below a composite USB device could not be read."""

    def __init__(self, device_path: str, reason: Optional[BaseException] = None):
        self.device_path = device_path
        self.reason = reason
        msg = f"failed to read interfaces of {device_path}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)
