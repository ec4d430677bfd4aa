"""
Saved brightness values for ``restore()``.

``bright set --save`` writes the brightness a device had before it was
changed to ``<tmp>/bright/<device name>``; the ``restore()`` builtin
reads it back. Living in the temp directory, saved values don't survive
a reboot.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from bright.core.errors import BrightError

logger = logging.getLogger(__name__)

STORE_DIR = "bright"


class RestoreWriteError(BrightError):
    """Saving a brightness failed.

    ``stage`` is one of ``directory``, ``create`` or ``write``.
    """

    _STAGES = {
        "directory": "error at directory creation",
        "create": "error at file creation",
        "write": "error when writing to file",
    }

    def __init__(self, stage: str, cause: OSError):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{self._STAGES[stage]}: {cause}")


class RestoreStore:
    """Per-device saved brightness values."""

    def __init__(self, base_dir: Path | None = None) -> None:
        if base_dir is None:
            base_dir = Path(tempfile.gettempdir())
        self.root = base_dir / STORE_DIR

    def path_for(self, device_name: str) -> Path:
        """Get the file a device's brightness is saved to."""
        return self.root / device_name

    def load(self, device_name: str) -> int:
        """Load the saved brightness of *device_name*.

        Raises:
            FileNotFoundError: If nothing was saved for the device.
            OSError: If the file can't be read.
            ValueError: If the content isn't a 16 bit unsigned number.
        """
        path = self.path_for(device_name)
        content = path.read_text().strip()
        value = int(content)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"saved brightness {value} is out of range")
        logger.debug("Loaded brightness %d from %s", value, path)
        return value

    def save(self, device_name: str, brightness: int) -> Path:
        """Save *brightness* for *device_name* and return the file's path.

        Raises:
            RestoreWriteError: If the file can't be written.
        """
        path = self.path_for(device_name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RestoreWriteError("directory", e) from e

        try:
            f = path.open("w")
        except OSError as e:
            raise RestoreWriteError("create", e) from e
        with f:
            try:
                f.write(str(brightness))
            except OSError as e:
                raise RestoreWriteError("write", e) from e

        logger.debug("Saved brightness %d to %s", brightness, path)
        return path
