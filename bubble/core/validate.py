# bubble/core/validate.py
"""
Validate outline paths: continuity between commands, explicit closure, and
containment in the rectangle they were built for.
"""

from __future__ import annotations

import math

from shapely.geometry import box

from bubble.core.config import CONTAINMENT_TOLERANCE, GEOMETRY_TOLERANCE
from bubble.core.geometry import command_start, outline_bounds, outline_to_polygon, polygon_contains_with_tol
from bubble.core.types import ClosePath, MoveTo, OutlinePath, Point, Rect


def _close(a: Point, b: Point, tol: float) -> bool:
    return math.dist(a, b) <= tol


def check_continuity(path: OutlinePath, tol: float = GEOMETRY_TOLERANCE) -> list[str]:
    """
    Problems found in path, empty when it starts with MoveTo, every command
    starts where the previous one ended, and it ends with ClosePath.
    """
    problems: list[str] = []
    cmds = list(path)
    if not cmds:
        return ["empty path"]
    if not isinstance(cmds[0], MoveTo):
        problems.append("path does not start with MoveTo")
    current: Point | None = None
    for i, cmd in enumerate(cmds):
        if isinstance(cmd, ClosePath):
            if i != len(cmds) - 1:
                problems.append(f"command {i}: ClosePath before end of path")
            continue
        start = command_start(cmd, current)
        if start is not None and current is not None and not _close(start, current, tol):
            problems.append(f"command {i}: starts at {start}, previous ended at {current}")
        current = cmd.end
    if not path.is_closed:
        problems.append("path is not closed")
    return problems


def validate_outline(path: OutlinePath, tol: float = GEOMETRY_TOLERANCE) -> tuple[bool, list[str]]:
    """(ok, problems) for continuity and closure."""
    problems = check_continuity(path, tol)
    return not problems, problems


def validate_outline_inside_rect(
    path: OutlinePath,
    rect: Rect,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> tuple[bool, float]:
    """
    True if the outline stays within rect (with tolerance).
    Also returns the largest overflow past any rect side (0.0 when inside).
    """
    minx, miny, maxx, maxy = outline_bounds(path)
    overflow = max(0.0, -minx, -miny, maxx - rect.width, maxy - rect.height)
    poly = outline_to_polygon(path)
    # zero-width tails flatten to a spike, which shapely reports as invalid
    if poly.is_empty or not poly.is_valid:
        return overflow <= tolerance, overflow
    ok = polygon_contains_with_tol(box(0.0, 0.0, rect.width, rect.height), poly, tolerance)
    return ok, overflow
