"""
User configuration.

Read from ``$BRIGHT_CONFIG`` or ``~/.config/bright/config.toml``:

    [easing]
    default = "x^2"
    intel_backlight = "2^x"

    [animation]
    fps = 30

Every key of ``[easing]`` except ``default`` is a device name.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bright.core.easing import EasingError, EasingKind, Linear, parse_easing
from bright.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "BRIGHT_CONFIG"
DEFAULT_KEY = "default"


class Easings:
    """Easing per device name, with a fallback for everything else."""

    def __init__(self, by_device: dict[str, EasingKind] | None = None) -> None:
        self._by_device = dict(by_device or {})

    @classmethod
    def uniform(cls, easing: EasingKind) -> Easings:
        """The same easing for every device."""
        return cls({DEFAULT_KEY: easing})

    def get_or_default(self, name: str | None) -> EasingKind:
        if name is not None and name in self._by_device:
            return self._by_device[name]
        return self._by_device.get(DEFAULT_KEY, Linear())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Easings):
            return NotImplemented
        return self._by_device == other._by_device

    def __repr__(self) -> str:
        entries = ", ".join(f"{k}={v}" for k, v in self._by_device.items())
        return f"Easings({entries})"


class AnimationConfig(BaseModel):
    """The [animation] table."""

    fps: int = Field(default=30, ge=1, le=1000)

    model_config = ConfigDict(frozen=True, extra="forbid")


class BrightConfig(BaseModel):
    """Parsed configuration file."""

    easing: dict[str, str] = Field(default_factory=dict)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("easing")
    @classmethod
    def _check_easings(cls, value: dict[str, str]) -> dict[str, str]:
        for device, text in value.items():
            try:
                parse_easing(text.strip())
            except EasingError as e:
                raise ValueError(f"can't parse easing for {device}: {e}") from e
        return value

    @property
    def easings(self) -> Easings:
        return Easings(
            {device: parse_easing(text.strip()) for device, text in self.easing.items()}
        )


def config_path() -> Path | None:
    """Location of the config file, or None if there is none.

    Raises:
        ConfigError: If $BRIGHT_CONFIG is set but isn't a file.
    """
    env = os.environ.get(CONFIG_ENV)
    if env:
        path = Path(env)
        if not path.is_file():
            raise ConfigError(path, f"{CONFIG_ENV} doesn't point to a file")
        return path

    candidates = [Path.home() / ".config"]
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        candidates.append(Path(xdg))

    for config_dir in candidates:
        path = config_dir / "bright" / "config.toml"
        if path.is_file():
            return path
    return None


def load_config(path: Path) -> BrightConfig:
    """Load and validate the config file at *path*.

    Raises:
        ConfigError: If the file can't be read or is invalid.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(path, f"can't read file: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, str(e)) from e

    try:
        config = BrightConfig.model_validate(data)
    except ValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors())
        raise ConfigError(path, reason) from e

    logger.debug("Loaded config from %s", path)
    return config


def find_config() -> BrightConfig:
    """The user's configuration, or defaults if there is no file."""
    path = config_path()
    if path is None:
        return BrightConfig()
    return load_config(path)
