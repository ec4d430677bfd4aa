"""
Smooth brightness transitions.

AnimationIter turns a start and a target brightness into the frames of
a transition. Steps are equally sized in the perceptual domain of the
easing, so a transition looks evenly paced even though the written
values aren't.

Pacing (sleeping between frames) is left to the caller.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from datetime import timedelta

from bright.core.easing import Easing
from bright.core.ir.expressions import U16_MAX

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|min|m|h)?\s*$")

_DURATION_UNITS = {
    "ms": lambda v: timedelta(milliseconds=v),
    "s": lambda v: timedelta(seconds=v),
    "m": lambda v: timedelta(minutes=v),
    "min": lambda v: timedelta(minutes=v),
    "h": lambda v: timedelta(hours=v),
}


class AnimationIter(Iterator[tuple[int, bool]]):
    """
    Frames of a single transition.

    Yields exactly ``frame_count`` tuples ``(brightness, is_last)``. The
    last one is always ``(desired, True)``, whatever rounding happened
    before. Once exhausted the iterator stays exhausted.
    """

    def __init__(
        self,
        current: int,
        desired: int,
        max_brightness: int,
        frame_count: int,
        easing: Easing,
    ) -> None:
        if frame_count < 1:
            raise ValueError(f"frame_count must be at least 1, got {frame_count}")
        self.current = current
        self.desired = desired
        self.max_brightness = max_brightness
        self.remaining = frame_count
        self.easing = easing

    def _actual(self, value: int) -> float:
        if self.max_brightness == 0:
            return 0.0
        return value / self.max_brightness

    def __next__(self) -> tuple[int, bool]:
        if self.remaining == 0:
            raise StopIteration
        if self.remaining == 1:
            self.current = self.desired
            self.remaining = 0
            return self.desired, True

        perceived = self.easing.from_actual(self._actual(self.current))
        target = self.easing.from_actual(self._actual(self.desired))
        step = (target - perceived) / self.remaining

        new_actual = self.easing.to_actual(perceived + step) * self.max_brightness
        if math.isfinite(new_actual):
            # Round half away from zero, saturating at the u16 range
            self.current = min(max(math.floor(new_actual + 0.5), 0), U16_MAX)
        else:
            # Targets outside the easing's range have no perceptual position
            self.current = 0
        self.remaining -= 1
        return self.current, False

    def __len__(self) -> int:
        return self.remaining

    def __length_hint__(self) -> int:
        return self.remaining


def parse_duration(text: str) -> timedelta:
    """Parse durations like ``500ms``, ``1.5s``, ``2m`` or ``1h``.

    A bare number is taken as milliseconds.

    Raises:
        ValueError: If the text isn't a duration.
    """
    m = _DURATION_RE.match(text)
    if m is None:
        raise ValueError(f"invalid duration: {text!r}")
    value, unit = m.groups()
    return _DURATION_UNITS[unit or "ms"](float(value))


def frame_interval(fps: int) -> timedelta:
    """Time between two frames."""
    if fps < 1:
        raise ValueError(f"fps must be at least 1, got {fps}")
    return timedelta(milliseconds=1000 // fps)


def frame_count(duration: timedelta | None, fps: int) -> int:
    """Number of frames for a transition taking *duration*.

    Without a duration the target is written right away (one frame).
    """
    if duration is None:
        return 1
    interval = frame_interval(fps)
    return max(1, duration // interval)
