"""Tests for sysfs backed devices and their discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from bright.core.easing import Linear, Polynomial
from bright.device import (
    Backlight,
    BlPower,
    BlType,
    BrightnessOverflowError,
    Device,
    DeviceClass,
    DeviceInitError,
    DeviceNotFoundError,
    DeviceReadError,
    Information,
    Led,
    all_devices,
    find_devices,
    get_device,
)
from bright.device import discovery


@pytest.fixture
def backlight(sysfs_root: Path) -> Backlight:
    return Backlight.open(sysfs_root / "backlight" / "intel_backlight")


@pytest.fixture
def led(sysfs_root: Path) -> Led:
    return Led.open(sysfs_root / "leds" / "input0::capslock")


class TestLed:
    def test_open(self, led: Led, sysfs_root: Path) -> None:
        assert led.name == "input0::capslock"
        assert led.max_brightness == 1
        assert led.path == sysfs_root / "leds" / "input0::capslock"
        assert led.current() == 0

    def test_is_device(self, led: Led) -> None:
        assert isinstance(led, Device)

    def test_open_missing_files(self, sysfs_root: Path) -> None:
        with pytest.raises(DeviceInitError, match="only 1 of 2"):
            Led.open(sysfs_root / "leds" / "broken")

    def test_open_bad_max(self, sysfs_root: Path) -> None:
        (sysfs_root / "leds" / "broken" / "max_brightness").write_text("lots")
        with pytest.raises(DeviceInitError):
            Led.open(sysfs_root / "leds" / "broken")

    def test_set(self, led: Led) -> None:
        assert led.set(1) == 1
        assert led.current() == 1
        assert (led.dev_path / "brightness").read_text() == "1"

    def test_set_truncates(self, backlight: Backlight) -> None:
        backlight.set(7)
        assert (backlight.dev_path / "brightness").read_text() == "7"

    def test_set_overflow(self, led: Led) -> None:
        with pytest.raises(BrightnessOverflowError) as exc_info:
            led.set(2)
        assert (exc_info.value.max, exc_info.value.provided) == (1, 2)
        assert led.current() == 0

    def test_read_garbage(self, led: Led) -> None:
        (led.dev_path / "brightness").write_text("on\n")
        with pytest.raises(DeviceReadError, match="can't parse"):
            led.current()

    def test_meta(self, led: Led) -> None:
        rows = [str(info) for info in led.meta(Linear())]
        assert rows[0] == f"Device: input0::capslock ({led.dev_path})"
        assert rows[1] == "Current brightness: 0 (0.0%)"
        assert rows[2] == "Max brightness: 1"


class TestBacklight:
    def test_current_is_actual_brightness(self, backlight: Backlight) -> None:
        (backlight.dev_path / "actual_brightness").write_text("480\n")
        assert backlight.current() == 480
        assert backlight.wanted_brightness() == 500

    def test_power_and_type(self, backlight: Backlight) -> None:
        assert backlight.power_mode() == BlPower.ON
        assert backlight.bl_type() == BlType.FIRMWARE

    def test_power_off(self, backlight: Backlight) -> None:
        (backlight.dev_path / "bl_power").write_text("4\n")
        assert str(backlight.power_mode()) == "off"

    def test_meta(self, backlight: Backlight) -> None:
        rows = backlight.meta(Polynomial(2.0))
        assert Information("Current brightness", "500", "70.7%") in rows
        assert Information("Power mode", "on") in rows
        assert Information("Type", "firmware") in rows

    def test_meta_skips_unknown_type(self, backlight: Backlight) -> None:
        (backlight.dev_path / "type").write_text("quantum\n")
        categories = [info.category for info in backlight.meta(Linear())]
        assert "Type" not in categories
        assert "Power mode" in categories

    def test_requires_backlight_files(self, sysfs_root: Path) -> None:
        with pytest.raises(DeviceInitError):
            Backlight.open(sysfs_root / "leds" / "input0::capslock")


class TestDiscovery:
    def test_find_devices(self, sysfs_root: Path) -> None:
        leds = find_devices(DeviceClass.LEDS, sysfs_root)
        assert [d.name for d in leds] == ["input0::capslock"]
        assert type(leds[0]) is Led

    def test_missing_class_dir(self, tmp_path: Path) -> None:
        assert find_devices(DeviceClass.BACKLIGHT, tmp_path) == []
        assert all_devices(tmp_path) == {}

    def test_all_devices(self, sysfs_root: Path) -> None:
        grouped = all_devices(sysfs_root)
        assert list(grouped) == [DeviceClass.BACKLIGHT, DeviceClass.LEDS]
        assert isinstance(grouped[DeviceClass.BACKLIGHT][0], Backlight)

    def test_default_device_is_backlight(self, sysfs_root: Path) -> None:
        assert get_device(root=sysfs_root).name == "intel_backlight"

    def test_named_device(self, sysfs_root: Path) -> None:
        assert get_device("input0::capslock", sysfs_root).max_brightness == 1

    def test_unknown_device(self, sysfs_root: Path) -> None:
        with pytest.raises(DeviceNotFoundError, match="nope"):
            get_device("nope", sysfs_root)

    def test_no_devices(self, tmp_path: Path) -> None:
        with pytest.raises(DeviceNotFoundError, match="no device available"):
            get_device(root=tmp_path)

    def test_module_root(self, sysfs_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(discovery, "SYSFS_CLASS_ROOT", sysfs_root)
        assert get_device().name == "intel_backlight"
