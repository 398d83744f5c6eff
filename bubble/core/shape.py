# bubble/core/shape.py
"""
BubbleShape: the style values of one bubble, independent of any rendering
framework. Produces outlines for any rectangle it is laid out in.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

from bubble.core.config import (
    DEFAULT_ARROW_HEIGHT,
    DEFAULT_ARROW_WIDTH,
    DEFAULT_BORDER_RADIUS,
    DEFAULT_DIRECTION,
    DEFAULT_POSITION_RATIO,
    DEFAULT_STROKE_COLOR,
    DEFAULT_STROKE_WIDTH,
    DEFAULT_STYLE,
)
from bubble.core.error_codes import INVALID_SCALE, InvalidArgumentError
from bubble.core.fit import fit_params
from bubble.core.path import build_outline
from bubble.core.types import (
    BubbleParams,
    BubbleStyle,
    Direction,
    EdgeInset,
    FittedParams,
    OutlinePath,
    Rect,
)


class PathProducer(Protocol):
    def outer_path(self, rect: Rect) -> OutlinePath: ...


@dataclass(frozen=True)
class BubbleShape:
    """Rounded rectangle with one tail. Validates direction and ratio on construction."""
    style: BubbleStyle = BubbleStyle(DEFAULT_STYLE)
    stroke_color: str = DEFAULT_STROKE_COLOR
    stroke_width: float = DEFAULT_STROKE_WIDTH
    direction: Direction = Direction(DEFAULT_DIRECTION)
    position_ratio: float = DEFAULT_POSITION_RATIO
    arrow_height: float = DEFAULT_ARROW_HEIGHT
    arrow_width: float = DEFAULT_ARROW_WIDTH
    border_radius: float = DEFAULT_BORDER_RADIUS

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", BubbleStyle(self.style))
        object.__setattr__(self, "direction", self.params.direction)

    @property
    def params(self) -> BubbleParams:
        return BubbleParams(
            direction=self.direction,
            border_radius=self.border_radius,
            arrow_height=self.arrow_height,
            arrow_width=self.arrow_width,
            position_ratio=self.position_ratio,
        )

    def fit(self, rect: Rect) -> FittedParams:
        return fit_params(rect, self.params)

    def outer_path(self, rect: Rect) -> OutlinePath:
        return build_outline(rect, self.direction, self.fit(rect))

    def arrow_margin(self, rect: Rect | None = None) -> EdgeInset:
        """Inset on the arrow side; uses the fitted height when rect is given."""
        height = self.fit(rect).arrow_height if rect is not None else max(0.0, self.arrow_height)
        return EdgeInset.for_arrow(self.direction, height)

    def scale(self, t: float) -> BubbleShape:
        """Linearly scale every length; ratio and direction are unchanged."""
        if t < 0:
            raise InvalidArgumentError(INVALID_SCALE, f"t={t}")
        return replace(
            self,
            stroke_width=self.stroke_width * t,
            arrow_height=self.arrow_height * t,
            arrow_width=self.arrow_width * t,
            border_radius=self.border_radius * t,
        )
