"""
Deterministic tests for geometry: unit vectors, arc flattening, outline to
polygon, bounds, polygon_contains_with_tol.
"""

from __future__ import annotations

import math

import pytest
from shapely.geometry import Polygon

from bubble.core.geometry import (
    arc_points,
    command_start,
    outline_bounds,
    outline_coords,
    outline_to_polygon,
    polygon_contains_with_tol,
)
from bubble.core.path import compute_outline
from bubble.core.types import ArcTo, Direction, LineTo, MoveTo, Rect, unit_vector


def test_unit_vector_exact_on_quarter_turns() -> None:
    assert unit_vector(0.0) == (1.0, 0.0)
    assert unit_vector(0.5 * math.pi) == (0.0, 1.0)
    assert unit_vector(math.pi) == (-1.0, 0.0)
    assert unit_vector(1.5 * math.pi) == (0.0, -1.0)
    assert unit_vector(-0.5 * math.pi) == (0.0, -1.0)
    x, y = unit_vector(math.pi / 6)
    assert x == pytest.approx(math.sqrt(3) / 2) and y == pytest.approx(0.5)


def test_arc_points_endpoints_and_radius() -> None:
    arc = ArcTo((10.0, 10.0), 10.0, math.pi, 0.5 * math.pi)
    xy = arc_points(arc, segments_per_quarter=8)
    assert xy.shape == (9, 2)
    assert tuple(xy[0]) == (0.0, 10.0)
    assert tuple(xy[-1]) == (10.0, 0.0)
    for x, y in xy:
        assert math.hypot(x - 10.0, y - 10.0) == pytest.approx(10.0)


def test_command_start() -> None:
    arc = ArcTo((0.0, 0.0), 2.0, 0.0, 0.5 * math.pi)
    assert command_start(arc, (5.0, 5.0)) == (2.0, 0.0)
    assert command_start(LineTo((1.0, 1.0)), (3.0, 3.0)) == (3.0, 3.0)
    assert command_start(MoveTo((1.0, 1.0)), (3.0, 3.0)) is None


def test_outline_coords_closed_ring() -> None:
    path = compute_outline(Rect(100, 50), Direction.BOTTOM, 10.0, 5.0, 8.0, 0.5)
    xy = outline_coords(path)
    assert tuple(xy[0]) == tuple(xy[-1]) == (0.0, 10.0)


def test_outline_to_polygon_area() -> None:
    path = compute_outline(Rect(100, 50), Direction.BOTTOM, 10.0, 5.0, 8.0, 0.5)
    poly = outline_to_polygon(path)
    assert poly.is_valid
    body = 100 * 45 - (4 - math.pi) * 10 ** 2
    tail = 0.5 * 8 * 5
    assert poly.area == pytest.approx(body + tail, abs=1.0)


def test_outline_to_polygon_degenerate_empty() -> None:
    path = compute_outline(Rect(0, 0), Direction.TOP, 10.0, 5.0, 8.0, 0.5)
    assert outline_to_polygon(path).is_empty


def test_outline_bounds() -> None:
    path = compute_outline(Rect(100, 50), Direction.BOTTOM, 10.0, 5.0, 8.0, 0.5)
    minx, miny, maxx, maxy = outline_bounds(path)
    assert minx == pytest.approx(0.0) and miny == pytest.approx(0.0)
    assert maxx == pytest.approx(100.0) and maxy == pytest.approx(50.0)


def test_polygon_contains_with_tol() -> None:
    poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    inside = Polygon([(2, 2), (4, 2), (4, 4), (2, 4)])
    assert polygon_contains_with_tol(poly, inside) is True
    outside = Polygon([(8, 8), (12, 8), (12, 12), (8, 12)])
    assert polygon_contains_with_tol(poly, outside) is False
    touching = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    assert polygon_contains_with_tol(poly, touching) is True
