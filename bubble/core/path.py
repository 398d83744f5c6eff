# bubble/core/path.py
"""
Outline path builder: rounded rectangle traversed clockwise from the
top-left corner, with the triangular tail inserted on the arrow's edge.
"""

from __future__ import annotations

import math

from bubble.core.fit import edge_length, fit_params
from bubble.core.types import (
    ArcTo,
    BubbleParams,
    ClosePath,
    Direction,
    EdgeInset,
    FittedParams,
    LineTo,
    MoveTo,
    OutlinePath,
    PathCommand,
    Rect,
)

QUARTER_TURN = 0.5 * math.pi


def _tail(
    direction: Direction,
    rect: Rect,
    inset: EdgeInset,
    center: float,
    half_width: float,
) -> list[PathCommand]:
    """Base, apex, base of the tail in clockwise traversal order."""
    w, h = rect.width, rect.height
    if direction is Direction.TOP:
        pts = [(center - half_width, inset.top), (center, 0.0), (center + half_width, inset.top)]
    elif direction is Direction.RIGHT:
        x = w - inset.right
        pts = [(x, center - half_width), (w, center), (x, center + half_width)]
    elif direction is Direction.BOTTOM:
        y = h - inset.bottom
        pts = [(center + half_width, y), (center, h), (center - half_width, y)]
    else:
        pts = [(inset.left, center + half_width), (0.0, center), (inset.left, center - half_width)]
    return [LineTo(p) for p in pts]


def build_outline(rect: Rect, direction: Direction, fitted: FittedParams) -> OutlinePath:
    """
    Emit the closed outline for already-fitted values.
    Zero-size tails and zero-radius corners are emitted as degenerate
    segments rather than dropped.
    """
    w, h = rect.width, rect.height
    r = fitted.border_radius
    inset = EdgeInset.for_arrow(direction, fitted.arrow_height)
    left, top = inset.left, inset.top
    right, bottom = w - inset.right, h - inset.bottom

    center = fitted.position_ratio * edge_length(rect, direction)
    half_width = 0.5 * fitted.arrow_width

    # the command before each corner ends exactly at that arc's own start
    top_left = ArcTo((left + r, top + r), r, math.pi, QUARTER_TURN)
    top_right = ArcTo((right - r, top + r), r, -QUARTER_TURN, QUARTER_TURN)
    bottom_right = ArcTo((right - r, bottom - r), r, 0.0, QUARTER_TURN)
    bottom_left = ArcTo((left + r, bottom - r), r, QUARTER_TURN, QUARTER_TURN)

    cmds: list[PathCommand] = [MoveTo(top_left.start), top_left]
    if direction is Direction.TOP:
        cmds += _tail(direction, rect, inset, center, half_width)
    cmds.append(LineTo(top_right.start))
    cmds.append(top_right)

    if direction is Direction.RIGHT:
        cmds += _tail(direction, rect, inset, center, half_width)
    cmds.append(LineTo(bottom_right.start))
    cmds.append(bottom_right)

    if direction is Direction.BOTTOM:
        cmds += _tail(direction, rect, inset, center, half_width)
    cmds.append(LineTo(bottom_left.start))
    cmds.append(bottom_left)

    if direction is Direction.LEFT:
        cmds += _tail(direction, rect, inset, center, half_width)
    cmds.append(ClosePath())
    return OutlinePath(tuple(cmds))


def compute_outline(
    rect: Rect,
    direction: Direction | str,
    border_radius: float,
    arrow_height: float,
    arrow_width: float,
    position_ratio: float,
) -> OutlinePath:
    """
    Validate, fit and build in one call.
    Raises InvalidArgumentError for a ratio outside [0, 1] or a missing direction.
    """
    params = BubbleParams(
        direction=direction,  # type: ignore[arg-type]
        border_radius=border_radius,
        arrow_height=arrow_height,
        arrow_width=arrow_width,
        position_ratio=position_ratio,
    )
    fitted = fit_params(rect, params)
    return build_outline(rect, params.direction, fitted)
