# bubble/core/bubble.py
"""
Bubble decoration: fill colour, padding and elevation around a BubbleShape.
Colours and elevation pass through unchanged; only the content margin
depends on the shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from matplotlib.colors import to_rgba

from bubble.core.config import (
    DEFAULT_ELEVATION,
    DEFAULT_FILL_COLOR,
    SHADOW_COLOR,
    TRANSPARENT,
)
from bubble.core.shape import BubbleShape
from bubble.core.types import EdgeInset


def is_transparent(color: str | None) -> bool:
    """True when color resolves to zero alpha. Raises ValueError for unknown colours."""
    if color is None:
        return True
    if isinstance(color, str) and color.strip().lower() == "transparent":
        return True
    return bool(to_rgba(color)[3] == 0.0)


@dataclass(frozen=True)
class Bubble:
    shape: BubbleShape = field(default_factory=BubbleShape)
    color: str = DEFAULT_FILL_COLOR
    padding: EdgeInset | None = None
    elevation: float | None = None

    def content_margin(self) -> EdgeInset:
        """Space on the arrow side so content never sits on the tail."""
        return self.shape.arrow_margin()

    def content_inset(self) -> EdgeInset:
        """Arrow margin plus padding."""
        margin = self.content_margin()
        return margin + self.padding if self.padding is not None else margin

    def resolved_elevation(self) -> float:
        if self.elevation is not None:
            return self.elevation
        return 0.0 if is_transparent(self.color) else DEFAULT_ELEVATION

    def shadow_color(self) -> str:
        """No shadow under a transparent fill."""
        return TRANSPARENT if is_transparent(self.color) else SHADOW_COLOR
