# bubble/core/types.py
"""
Dataclasses for bubble rectangles, style parameters, fitted values and
outline path commands. Coordinates are y-down with the origin at the
rectangle's top-left corner; angles are radians.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from bubble.core.error_codes import (
    INVALID_POSITION_RATIO,
    INVALID_RECT,
    INVALID_SCALE,
    MISSING_DIRECTION,
    InvalidArgumentError,
)

Point = tuple[float, float]


class Direction(str, Enum):
    """Edge the tail protrudes from."""
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"

    @property
    def is_horizontal(self) -> bool:
        """True when the tail protrudes along the x axis."""
        return self in (Direction.LEFT, Direction.RIGHT)


class BubbleStyle(str, Enum):
    STROKE = "stroke"
    FILL = "fill"


def coerce_direction(direction: Direction | str | None) -> Direction:
    """Return direction as a Direction; raise InvalidArgumentError when missing or unknown."""
    if isinstance(direction, Direction):
        return direction
    if direction is None:
        raise InvalidArgumentError(MISSING_DIRECTION, "direction is None")
    try:
        return Direction(str(direction).lower())
    except ValueError:
        raise InvalidArgumentError(MISSING_DIRECTION, f"got {direction!r}") from None


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box; all geometry is relative to its top-left corner."""
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (self.width >= 0 and self.height >= 0):
            raise InvalidArgumentError(INVALID_RECT, f"{self.width} x {self.height}")

    def scale(self, t: float) -> Rect:
        if t < 0:
            raise InvalidArgumentError(INVALID_SCALE, f"t={t}")
        return Rect(self.width * t, self.height * t)


@dataclass(frozen=True)
class EdgeInset:
    """Per-side inset of the rounded body; only the arrow side is non-zero."""
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def for_arrow(cls, direction: Direction, arrow_height: float) -> EdgeInset:
        if direction is Direction.LEFT:
            return cls(left=arrow_height)
        if direction is Direction.TOP:
            return cls(top=arrow_height)
        if direction is Direction.RIGHT:
            return cls(right=arrow_height)
        if direction is Direction.BOTTOM:
            return cls(bottom=arrow_height)
        raise InvalidArgumentError(MISSING_DIRECTION, f"got {direction!r}")

    def __add__(self, other: EdgeInset) -> EdgeInset:
        return EdgeInset(
            self.left + other.left,
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
        )


@dataclass(frozen=True)
class BubbleParams:
    """
    Requested style values. Direction and position ratio are validated here;
    the other values are clamped later by the fitter, never rejected.
    """
    direction: Direction
    border_radius: float
    arrow_height: float
    arrow_width: float
    position_ratio: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", coerce_direction(self.direction))
        # NaN fails both comparisons
        if not (0.0 <= self.position_ratio <= 1.0):
            raise InvalidArgumentError(INVALID_POSITION_RATIO, f"got {self.position_ratio}")


@dataclass(frozen=True)
class FittedParams:
    """Style values after clamping to one rectangle. Lives for a single computation."""
    arrow_height: float
    border_radius: float
    arrow_width: float
    position_ratio: float


# ----- Path commands -----

_QUARTER_TURN_UNITS: dict[int, Point] = {
    0: (1.0, 0.0),
    1: (0.0, 1.0),
    2: (-1.0, 0.0),
    3: (0.0, -1.0),
}


def unit_vector(angle: float) -> Point:
    """(cos, sin) of angle; exact for multiples of a quarter turn."""
    quarters = angle / (0.5 * math.pi)
    nearest = round(quarters)
    if abs(quarters - nearest) < 1e-12:
        return _QUARTER_TURN_UNITS[nearest % 4]
    return (math.cos(angle), math.sin(angle))


@dataclass(frozen=True)
class MoveTo:
    point: Point

    @property
    def end(self) -> Point:
        return self.point


@dataclass(frozen=True)
class LineTo:
    point: Point

    @property
    def end(self) -> Point:
        return self.point


@dataclass(frozen=True)
class ArcTo:
    """Circular arc; positive sweep is clockwise on a y-down canvas."""
    center: Point
    radius: float
    start_angle: float
    sweep_angle: float

    def point_at(self, angle: float) -> Point:
        ux, uy = unit_vector(angle)
        return (self.center[0] + self.radius * ux, self.center[1] + self.radius * uy)

    @property
    def start(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end(self) -> Point:
        return self.point_at(self.start_angle + self.sweep_angle)


@dataclass(frozen=True)
class ClosePath:
    """Straight segment back to the subpath's MoveTo point."""


PathCommand = Union[MoveTo, LineTo, ArcTo, ClosePath]


@dataclass(frozen=True)
class OutlinePath:
    """Ordered, closed sequence of path commands."""
    commands: tuple[PathCommand, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    @property
    def start(self) -> Point | None:
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                return cmd.point
        return None

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    def points(self) -> list[Point]:
        """End point of every command; ClosePath resolves to the start point."""
        out: list[Point] = []
        start = self.start
        for cmd in self.commands:
            if isinstance(cmd, ClosePath):
                if start is not None:
                    out.append(start)
            else:
                out.append(cmd.end)
        return out
