"""
Device error types.
"""

from __future__ import annotations

from pathlib import Path

from bright.core.errors import BrightError


class DeviceError(BrightError):
    """Base class for device failures."""


class DeviceReadError(DeviceError):
    """A brightness file couldn't be read or didn't contain a number."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        verb = "parse" if isinstance(cause, ValueError) else "read"
        super().__init__(f"can't {verb} the brightness ({cause})")


class DeviceWriteError(DeviceError):
    """Writing the brightness file failed."""

    def __init__(self, message: str, cause: OSError | None = None):
        self.cause = cause
        super().__init__(message)


class BrightnessOverflowError(DeviceWriteError):
    """A brightness above the device's maximum."""

    def __init__(self, max: int, provided: int):
        self.max = max
        self.provided = provided
        super().__init__(f"provided brightness {provided} is bigger than {max}")


class DeviceInitError(DeviceError):
    """A sysfs directory that doesn't describe a usable device."""


class DeviceNotFoundError(DeviceError):
    """No device (with the requested name) is available."""

    def __init__(self, name: str | None = None):
        self.name = name
        if name is None:
            super().__init__("no device available")
        else:
            super().__init__(f"no device named '{name}' available")
