"""
LED devices under /sys/class/leds.

An LED directory only needs ``brightness`` and ``max_brightness``. The
maximum is read once when the device is opened.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from bright.core.easing import Easing
from bright.device.base import (
    BRIGHTNESS_FILES,
    UNNAMED,
    DeviceClass,
    Information,
    perceptual_percent,
)
from bright.device.errors import (
    BrightnessOverflowError,
    DeviceInitError,
    DeviceReadError,
    DeviceWriteError,
)

logger = logging.getLogger(__name__)


def read_number(path: Path) -> int:
    """Read a sysfs file containing a single decimal number."""
    try:
        return int(path.read_text().strip())
    except (OSError, ValueError) as e:
        raise DeviceReadError(path, e) from e


def missing_files(path: Path, required: tuple[str, ...]) -> list[str]:
    """Names from *required* that aren't regular files in *path*."""
    try:
        present = {entry.name for entry in path.iterdir() if entry.is_file()}
    except OSError as e:
        raise DeviceInitError(f"can't list content of directory {path}: {e}") from e
    return [name for name in required if name not in present]


class Led:
    """A brightness device backed by a sysfs directory."""

    CLASS = DeviceClass.LEDS
    REQUIRED_FILES = BRIGHTNESS_FILES

    def __init__(self, dev_path: Path, max_brightness: int) -> None:
        self.dev_path = dev_path
        self._max = max_brightness

    @classmethod
    def open(cls, path: Path) -> Led:
        """Open the device directory at *path*.

        Raises:
            DeviceInitError: If required files are missing or the maximum
                can't be read.
        """
        missing = missing_files(path, cls.REQUIRED_FILES)
        if missing:
            found = len(cls.REQUIRED_FILES) - len(missing)
            raise DeviceInitError(
                f"only {found} of {len(cls.REQUIRED_FILES)} required files were found in {path}"
            )
        try:
            max_brightness = read_number(path / "max_brightness")
        except DeviceReadError as e:
            raise DeviceInitError(f"can't read maximal brightness of {path}") from e
        return cls(path, max_brightness)

    @property
    def name(self) -> str | None:
        return self.dev_path.name or None

    @property
    def max_brightness(self) -> int:
        return self._max

    @property
    def path(self) -> Path | None:
        return self.dev_path

    def current(self) -> int:
        return read_number(self.dev_path / "brightness")

    def set(self, value: int) -> int:
        if value > self._max:
            raise BrightnessOverflowError(self._max, value)

        target = self.dev_path / "brightness"
        logger.debug("Writing %d to %s", value, target)
        try:
            # Never create the file, sysfs attributes always exist
            fd = os.open(target, os.O_WRONLY | os.O_TRUNC)
            with os.fdopen(fd, "w") as f:
                f.write(str(value))
        except OSError as e:
            raise DeviceWriteError(f"writing the file failed: {e.strerror or e}", e) from e
        return value

    def meta(self, easing: Easing) -> list[Information]:
        """Describe the device for ``bright meta``."""
        try:
            cur: int | None = self.current()
        except DeviceReadError:
            cur = None

        percent = None
        if cur is not None:
            percent = f"{perceptual_percent(cur, self._max, easing):.1f}%"

        return [
            Information("Device", self.name or UNNAMED, str(self.dev_path)),
            Information("Current brightness", "?" if cur is None else str(cur), percent),
            Information("Max brightness", str(self._max)),
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.dev_path)!r}, max={self._max})"
