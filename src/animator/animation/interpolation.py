"""Interpolation helpers for animation logic.

Animation callbacks receive a progress value and compute the animated value
themselves:

    def on_progress(progress):
        sprite.position = interpolate(start_pos, end_pos, progress)

Progress is not clamped, so overshoot curves carry through to the value.
"""

from dataclasses import dataclass
from typing import Protocol, TypeVar


class Interpolatable(Protocol):
    """Anything that can be scaled by a float and added to its own type."""

    def __add__(self, other):
        ...

    def __mul__(self, factor: float):
        ...


T = TypeVar("T", bound=Interpolatable)


def interpolate(start: T, end: T, at: float) -> T:
    """Interpolate between two values.

    Works for floats, ints, numpy arrays and any Interpolatable type.

    Args:
        start: Value at progress 0
        end: Value at progress 1
        at: Animation progress

    Returns:
        start * (1 - at) + end * at
    """
    return start * (1 - at) + end * at


@dataclass(frozen=True)
class Point:
    """2D point, interpolated per field."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Size:
    """2D size, interpolated per field."""

    width: float = 0.0
    height: float = 0.0

    def __add__(self, other: "Size") -> "Size":
        return Size(self.width + other.width, self.height + other.height)

    def __mul__(self, factor: float) -> "Size":
        return Size(self.width * factor, self.height * factor)


def interpolate_color(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
    at: float,
) -> tuple[int, int, int]:
    """Interpolate between two RGB colors.

    Channels are rounded and clamped to 0-255, since overshoot curves
    can push them out of range.
    """
    return tuple(
        max(0, min(255, round(interpolate(s, e, at))))
        for s, e in zip(start, end)
    )
