"""Tests for saved brightness values."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from bright.core.restoration import RestoreStore, RestoreWriteError


@pytest.fixture
def store(tmp_path: Path) -> RestoreStore:
    return RestoreStore(tmp_path)


class TestRestoreStore:
    def test_path(self, store: RestoreStore, tmp_path: Path) -> None:
        assert store.path_for("intel_backlight") == tmp_path / "bright" / "intel_backlight"

    def test_default_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
        assert RestoreStore().root == tmp_path / "bright"

    def test_save_and_load(self, store: RestoreStore) -> None:
        path = store.save("intel_backlight", 420)
        assert path.read_text() == "420"
        assert store.load("intel_backlight") == 420

    def test_save_overwrites(self, store: RestoreStore) -> None:
        store.save("led", 1000)
        store.save("led", 7)
        assert store.load("led") == 7

    def test_load_strips_whitespace(self, store: RestoreStore) -> None:
        store.root.mkdir(parents=True)
        store.path_for("led").write_text(" 12\n")
        assert store.load("led") == 12

    def test_load_missing(self, store: RestoreStore) -> None:
        with pytest.raises(FileNotFoundError):
            store.load("nothing_saved")

    def test_load_garbage(self, store: RestoreStore) -> None:
        store.root.mkdir(parents=True)
        store.path_for("led").write_text("bright")
        with pytest.raises(ValueError):
            store.load("led")

    def test_load_out_of_range(self, store: RestoreStore) -> None:
        store.root.mkdir(parents=True)
        store.path_for("led").write_text("70000")
        with pytest.raises(ValueError, match="out of range"):
            store.load("led")

    def test_save_directory_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        with pytest.raises(RestoreWriteError) as exc_info:
            RestoreStore(blocker).save("led", 1)
        assert exc_info.value.stage == "directory"
        assert "directory creation" in str(exc_info.value)
