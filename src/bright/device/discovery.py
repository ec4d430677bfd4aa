"""
Device discovery in sysfs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bright.device.backlight import Backlight
from bright.device.base import DeviceClass
from bright.device.errors import DeviceError, DeviceNotFoundError
from bright.device.led import Led

logger = logging.getLogger(__name__)

SYSFS_CLASS_ROOT = Path("/sys/class")

_IMPLEMENTATIONS: dict[DeviceClass, type[Led]] = {
    DeviceClass.BACKLIGHT: Backlight,
    DeviceClass.LEDS: Led,
}


def find_devices(device_class: DeviceClass, root: Path | None = None) -> list[Led]:
    """Open every usable device of *device_class*, sorted by name."""
    class_dir = (root or SYSFS_CLASS_ROOT) / device_class.sysfs_dir
    if not class_dir.is_dir():
        return []

    impl = _IMPLEMENTATIONS[device_class]
    devices: list[Led] = []
    for entry in sorted(class_dir.iterdir()):
        try:
            devices.append(impl.open(entry))
        except DeviceError as e:
            logger.debug("Ignoring %s: %s", entry, e)
    return devices


def all_devices(root: Path | None = None) -> dict[DeviceClass, list[Led]]:
    """All devices grouped by class; classes without devices are left out."""
    grouped: dict[DeviceClass, list[Led]] = {}
    for device_class in DeviceClass:
        devices = find_devices(device_class, root)
        if devices:
            grouped[device_class] = devices
    return grouped


def get_device(name: str | None = None, root: Path | None = None) -> Led:
    """The device called *name*, or the first backlight (then LED) if None.

    Raises:
        DeviceNotFoundError: If there is no such device.
    """
    for devices in all_devices(root).values():
        for device in devices:
            if name is None or device.name == name:
                return device
    raise DeviceNotFoundError(name)
