# bubble/core/fit.py
"""
Parameter fitting: clamp requested radius, arrow height, arrow width and
position ratio so that, for one rectangle and direction,
rounded corners never overlap each other, the arrow never overlaps a
rounded corner, and the arrow never extends past the rectangle.

Each step depends on the previous fitted values, in this order:
arrow height -> border radius -> arrow width -> position ratio.
"""

from __future__ import annotations

import logging

from bubble.core.config import BUBBLE_DEBUG
from bubble.core.types import BubbleParams, Direction, FittedParams, Rect

logger = logging.getLogger(__name__)


def _note_clamp(name: str, requested: float, fitted: float) -> None:
    if requested == fitted:
        return
    level = logging.WARNING if BUBBLE_DEBUG else logging.DEBUG
    logger.log(level, f"{name}: requested {requested:.4f}, fitted {fitted:.4f}")


def edge_length(rect: Rect, direction: Direction) -> float:
    """Length of the edge the arrow sits on."""
    return rect.height if direction.is_horizontal else rect.width


def fit_arrow_height(rect: Rect, direction: Direction, arrow_height: float) -> float:
    """Clamp to [0, extent of the rectangle along the protrusion axis]."""
    if arrow_height < 0:
        return 0.0
    limit = rect.width if direction.is_horizontal else rect.height
    return min(arrow_height, limit)


def fit_border_radius(
    rect: Rect, direction: Direction, border_radius: float, arrow_height_fit: float
) -> float:
    """Half the shorter side of the body left after reserving the arrow's protrusion."""
    if border_radius < 0:
        return 0.0
    if direction.is_horizontal:
        max_radius = 0.5 * min(rect.width - arrow_height_fit, rect.height)
    else:
        max_radius = 0.5 * min(rect.width, rect.height - arrow_height_fit)
    return min(border_radius, max_radius)


def fit_arrow_width(
    rect: Rect, direction: Direction, arrow_width: float, border_radius_fit: float
) -> float:
    """Edge length minus the two corner arcs on it; never negative."""
    if arrow_width < 0:
        return 0.0
    max_width = edge_length(rect, direction) - 2 * border_radius_fit
    return max(0.0, min(arrow_width, max_width))


def position_ratio_window(
    rect: Rect, direction: Direction, border_radius_fit: float, arrow_width_fit: float
) -> tuple[float, float]:
    """
    (min_ratio, max_ratio) keeping the arrow base clear of both corner arcs.
    A zero-length edge collapses the window to its midpoint.
    """
    length = edge_length(rect, direction)
    if length <= 0:
        return (0.5, 0.5)
    min_ratio = (border_radius_fit + 0.5 * arrow_width_fit) / length
    min_ratio = min(max(min_ratio, 0.0), 0.5)
    return (min_ratio, 1.0 - min_ratio)


def fit_position_ratio(
    rect: Rect,
    direction: Direction,
    position_ratio: float,
    border_radius_fit: float,
    arrow_width_fit: float,
) -> float:
    min_ratio, max_ratio = position_ratio_window(rect, direction, border_radius_fit, arrow_width_fit)
    if position_ratio < min_ratio:
        return min_ratio
    if position_ratio > max_ratio:
        return max_ratio
    return position_ratio


def fit_params(rect: Rect, params: BubbleParams) -> FittedParams:
    """
    Fit all four values for rect. Pure: identical inputs give identical outputs.
    Negative requests are floored to zero; degenerate rectangles may fit
    everything to zero without error.
    """
    d = params.direction
    ahf = fit_arrow_height(rect, d, params.arrow_height)
    brf = fit_border_radius(rect, d, params.border_radius, ahf)
    awf = fit_arrow_width(rect, d, params.arrow_width, brf)
    prf = fit_position_ratio(rect, d, params.position_ratio, brf, awf)

    _note_clamp("arrow_height", params.arrow_height, ahf)
    _note_clamp("border_radius", params.border_radius, brf)
    _note_clamp("arrow_width", params.arrow_width, awf)
    _note_clamp("position_ratio", params.position_ratio, prf)

    return FittedParams(
        arrow_height=ahf,
        border_radius=brf,
        arrow_width=awf,
        position_ratio=prf,
    )
