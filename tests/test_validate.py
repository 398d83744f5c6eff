"""
Deterministic tests for outline validation. Broken paths are built by hand.
"""

from __future__ import annotations

import math

from bubble.core.path import compute_outline
from bubble.core.types import ArcTo, ClosePath, Direction, LineTo, MoveTo, OutlinePath, Rect
from bubble.core.validate import check_continuity, validate_outline, validate_outline_inside_rect


def test_validate_outline_ok() -> None:
    path = compute_outline(Rect(80, 40), Direction.TOP, 6.0, 4.0, 10.0, 0.7)
    ok, problems = validate_outline(path)
    assert ok is True
    assert problems == []


def test_validate_outline_empty() -> None:
    ok, problems = validate_outline(OutlinePath())
    assert ok is False
    assert problems == ["empty path"]


def test_check_continuity_detects_gap() -> None:
    path = OutlinePath((
        MoveTo((0.0, 0.0)),
        LineTo((10.0, 0.0)),
        ArcTo((10.0, 5.0), 5.0, 0.0, 0.5 * math.pi),  # starts at (15, 5)
        ClosePath(),
    ))
    problems = check_continuity(path)
    assert len(problems) == 1
    assert problems[0].startswith("command 2")


def test_check_continuity_requires_close() -> None:
    path = OutlinePath((MoveTo((0.0, 0.0)), LineTo((10.0, 0.0)), LineTo((0.0, 10.0))))
    assert "path is not closed" in check_continuity(path)


def test_check_continuity_requires_leading_move() -> None:
    path = OutlinePath((LineTo((10.0, 0.0)), ClosePath()))
    assert "path does not start with MoveTo" in check_continuity(path)


def test_close_must_be_last() -> None:
    path = OutlinePath((MoveTo((0.0, 0.0)), ClosePath(), LineTo((1.0, 1.0)), ClosePath()))
    problems = check_continuity(path)
    assert any("ClosePath before end" in p for p in problems)


def test_validate_outline_inside_rect_reports_overflow() -> None:
    rect = Rect(10, 10)
    path = OutlinePath((
        MoveTo((0.0, 0.0)),
        LineTo((12.0, 0.0)),
        LineTo((12.0, 10.0)),
        LineTo((0.0, 10.0)),
        ClosePath(),
    ))
    ok, overflow = validate_outline_inside_rect(path, rect)
    assert ok is False
    assert overflow == 2.0


def test_validate_outline_inside_rect_contained() -> None:
    rect = Rect(60, 30)
    path = compute_outline(rect, Direction.RIGHT, 100.0, 100.0, 100.0, 1.0)
    ok, overflow = validate_outline_inside_rect(path, rect)
    assert ok is True
    assert overflow == 0.0
