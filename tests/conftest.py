"""Shared pytest fixtures for bright tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from bright.device.errors import BrightnessOverflowError, DeviceReadError


class FakeDevice:
    """In-memory device that records reads and writes."""

    def __init__(
        self,
        max_brightness: int = 1000,
        current: int = 500,
        name: str | None = "fake",
        readable: bool = True,
    ) -> None:
        self._max = max_brightness
        self._current = current
        self._name = name
        self.readable = readable
        self.reads = 0
        self.writes: list[int] = []

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def max_brightness(self) -> int:
        return self._max

    @property
    def path(self) -> Path | None:
        return None

    def current(self) -> int:
        self.reads += 1
        if not self.readable:
            raise DeviceReadError(Path("/fake/brightness"), OSError("unreadable"))
        return self._current

    def set(self, value: int) -> int:
        if value > self._max:
            raise BrightnessOverflowError(self._max, value)
        self.writes.append(value)
        self._current = value
        return value


@pytest.fixture
def device() -> FakeDevice:
    """Device with max=1000 and current=500."""
    return FakeDevice()


@pytest.fixture
def sysfs_root(tmp_path: Path) -> Path:
    """A fake /sys/class tree with one backlight, one LED and one broken LED."""
    root = tmp_path / "sys"

    backlight = root / "backlight" / "intel_backlight"
    backlight.mkdir(parents=True)
    (backlight / "brightness").write_text("500\n")
    (backlight / "actual_brightness").write_text("500\n")
    (backlight / "max_brightness").write_text("1000\n")
    (backlight / "bl_power").write_text("0\n")
    (backlight / "type").write_text("firmware\n")

    led = root / "leds" / "input0::capslock"
    led.mkdir(parents=True)
    (led / "brightness").write_text("0\n")
    (led / "max_brightness").write_text("1\n")

    broken = root / "leds" / "broken"
    broken.mkdir(parents=True)
    (broken / "brightness").write_text("0\n")

    return root


@pytest.fixture
def make_device():
    """Factory for devices with custom brightness, name or readability."""
    return FakeDevice
