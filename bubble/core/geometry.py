# bubble/core/geometry.py
"""
Geometry helpers: command start points, arc flattening, outline to shapely
polygon, bounds, containment.
"""

from __future__ import annotations

import math

import numpy as np
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from bubble.core.config import ARC_SEGMENTS, CONTAINMENT_TOLERANCE
from bubble.core.types import ArcTo, ClosePath, MoveTo, OutlinePath, PathCommand, Point


def command_start(cmd: PathCommand, current: Point | None) -> Point | None:
    """Where cmd begins drawing: its own start for arcs, else the current point."""
    if isinstance(cmd, ArcTo):
        return cmd.start
    if isinstance(cmd, MoveTo):
        return None
    return current


def arc_points(arc: ArcTo, segments_per_quarter: int = ARC_SEGMENTS) -> np.ndarray:
    """
    Sample arc as (N, 2) array including both endpoints.
    Endpoints use the exact start/end so flattened outlines stay continuous.
    """
    quarters = abs(arc.sweep_angle) / (0.5 * math.pi)
    n = max(1, int(math.ceil(quarters * segments_per_quarter)))
    angles = arc.start_angle + np.linspace(0.0, arc.sweep_angle, n + 1)
    xy = np.column_stack(
        (
            arc.center[0] + arc.radius * np.cos(angles),
            arc.center[1] + arc.radius * np.sin(angles),
        )
    )
    xy[0] = arc.start
    xy[-1] = arc.end
    return xy


def outline_coords(path: OutlinePath, segments_per_quarter: int = ARC_SEGMENTS) -> np.ndarray:
    """Flatten path to (N, 2) vertices; ClosePath appends the start point."""
    parts: list[np.ndarray] = []
    start = path.start
    for cmd in path:
        if isinstance(cmd, ArcTo):
            parts.append(arc_points(cmd, segments_per_quarter))
        elif isinstance(cmd, ClosePath):
            if start is not None:
                parts.append(np.array([start], dtype=float))
        else:
            parts.append(np.array([cmd.end], dtype=float))
    if not parts:
        return np.zeros((0, 2))
    return np.vstack(parts)


def _dedupe(xy: np.ndarray) -> np.ndarray:
    """Drop vertices identical to their predecessor (zero-radius arcs, degenerate tails)."""
    if len(xy) < 2:
        return xy
    keep = np.ones(len(xy), dtype=bool)
    keep[1:] = np.any(np.diff(xy, axis=0) != 0, axis=1)
    return xy[keep]


def outline_to_polygon(path: OutlinePath, segments_per_quarter: int = ARC_SEGMENTS) -> Polygon:
    """Shapely polygon of the flattened outline; empty when fewer than 3 distinct vertices."""
    xy = _dedupe(outline_coords(path, segments_per_quarter))
    if len(xy) < 4:
        return Polygon()
    return Polygon(xy)


def outline_bounds(path: OutlinePath) -> tuple[float, float, float, float]:
    """Return (minx, miny, maxx, maxy) of the flattened outline."""
    xy = outline_coords(path)
    if xy.shape[0] == 0:
        return (0.0, 0.0, 0.0, 0.0)
    mins = xy.min(axis=0)
    maxs = xy.max(axis=0)
    return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


def polygon_contains_with_tol(
    poly: BaseGeometry,
    inner: BaseGeometry,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> bool:
    """True if inner is fully inside poly, allowing tolerance on poly's boundary."""
    if poly is None or inner is None or poly.is_empty or inner.is_empty:
        return False
    if tolerance > 0:
        poly = poly.buffer(tolerance, join_style="mitre")
    return poly.contains(inner) or poly.covers(inner)
