"""
Backlights under /sys/class/backlight.

Backlights are LEDs with a few extra files. The current brightness is
read from ``actual_brightness`` (what the hardware reports) rather than
``brightness`` (what was last requested).
"""

from __future__ import annotations

import logging
from enum import IntEnum, StrEnum

from bright.core.easing import Easing
from bright.device.base import BRIGHTNESS_FILES, DeviceClass, Information
from bright.device.errors import DeviceError, DeviceReadError
from bright.device.led import Led, read_number

logger = logging.getLogger(__name__)

BACKLIGHT_FILES = ("actual_brightness", "bl_power", "type")


class BlPower(IntEnum):
    """Values of the ``bl_power`` file."""

    ON = 0
    OFF = 4

    def __str__(self) -> str:
        return self.name.lower()


class BlType(StrEnum):
    """Values of the ``type`` file."""

    RAW = "raw"
    PLATFORM = "platform"
    FIRMWARE = "firmware"


class Backlight(Led):
    """A backlight device."""

    CLASS = DeviceClass.BACKLIGHT
    REQUIRED_FILES = BRIGHTNESS_FILES + BACKLIGHT_FILES

    def current(self) -> int:
        return read_number(self.dev_path / "actual_brightness")

    def wanted_brightness(self) -> int:
        """The last requested brightness."""
        return read_number(self.dev_path / "brightness")

    def power_mode(self) -> BlPower:
        num = read_number(self.dev_path / "bl_power")
        try:
            return BlPower(num)
        except ValueError as e:
            raise DeviceError(f"invalid bl_power value {num}") from e

    def bl_type(self) -> BlType:
        path = self.dev_path / "type"
        try:
            content = path.read_text().strip()
        except OSError as e:
            raise DeviceReadError(path, e) from e
        try:
            return BlType(content)
        except ValueError as e:
            raise DeviceError(f"unknown backlight type {content!r}") from e

    def meta(self, easing: Easing) -> list[Information]:
        info = super().meta(easing)
        try:
            info.append(Information("Power mode", str(self.power_mode())))
        except DeviceError as e:
            logger.warning("Skipping power mode of %s: %s", self.dev_path, e)
        try:
            info.append(Information("Type", str(self.bl_type())))
        except DeviceError as e:
            logger.warning("Skipping type of %s: %s", self.dev_path, e)
        return info
