"""
Brightness devices.

Devices come from sysfs (``/sys/class/backlight`` and
``/sys/class/leds``); anything implementing the Device protocol can be
used for evaluation and animation.
"""

from bright.device.backlight import Backlight, BlPower, BlType
from bright.device.base import UNNAMED, Device, DeviceClass, Information
from bright.device.discovery import all_devices, find_devices, get_device
from bright.device.errors import (
    BrightnessOverflowError,
    DeviceError,
    DeviceInitError,
    DeviceNotFoundError,
    DeviceReadError,
    DeviceWriteError,
)
from bright.device.led import Led

__all__ = [
    "UNNAMED",
    "Backlight",
    "BlPower",
    "BlType",
    "BrightnessOverflowError",
    "Device",
    "DeviceClass",
    "DeviceError",
    "DeviceInitError",
    "DeviceNotFoundError",
    "DeviceReadError",
    "DeviceWriteError",
    "Information",
    "Led",
    "all_devices",
    "find_devices",
    "get_device",
]
