"""
Device protocol and shared pieces of the sysfs implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Protocol, runtime_checkable

from bright.core.easing import Easing

UNNAMED = "unnamed"

# Files every brightness device directory has
BRIGHTNESS_FILES = ("brightness", "max_brightness")


@runtime_checkable
class Device(Protocol):
    """Something with a readable and writable brightness."""

    @property
    def name(self) -> str | None:
        """Device name, e.g. ``intel_backlight``."""
        ...

    @property
    def max_brightness(self) -> int:
        """Highest brightness the device accepts."""
        ...

    @property
    def path(self) -> Path | None:
        """Backing directory, if any."""
        ...

    def current(self) -> int:
        """Read the current brightness.

        Raises:
            DeviceReadError: If the value can't be read.
        """
        ...

    def set(self, value: int) -> int:
        """Write a new brightness and return the value written.

        Raises:
            DeviceWriteError: If the value can't be written.
        """
        ...


class DeviceClass(StrEnum):
    """sysfs device classes bright knows about."""

    BACKLIGHT = "Backlight"
    LEDS = "Leds"

    @property
    def sysfs_dir(self) -> str:
        return _SYSFS_DIRS[self]


_SYSFS_DIRS = {
    DeviceClass.BACKLIGHT: "backlight",
    DeviceClass.LEDS: "leds",
}


@dataclass(frozen=True)
class Information:
    """One row of ``bright meta`` output."""

    category: str
    data: str
    details: str | None = None

    def __str__(self) -> str:
        if self.details:
            return f"{self.category}: {self.data} ({self.details})"
        return f"{self.category}: {self.data}"


def perceptual_percent(current: int, max_brightness: int, easing: Easing) -> float:
    """Current brightness as a perceptual percentage."""
    if max_brightness == 0:
        return 0.0
    return easing.from_actual(current / max_brightness) * 100
