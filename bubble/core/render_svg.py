# bubble/core/render_svg.py
"""
Export bubble outlines as SVG path data (M L A Z) and as self-contained SVG files.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from pathlib import Path

from bubble.core.bubble import Bubble, is_transparent
from bubble.core.config import RENDER_MARGIN, SVG_COORD_PRECISION
from bubble.core.types import ArcTo, BubbleStyle, ClosePath, LineTo, MoveTo, OutlinePath, Rect

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(v: float, precision: int = SVG_COORD_PRECISION) -> str:
    s = f"{v:.{precision}f}"
    # avoid "-0.0000"
    return s[1:] if s.startswith("-") and float(s) == 0 else s


def outline_to_svg_d(path: OutlinePath, precision: int = SVG_COORD_PRECISION) -> str:
    """
    Outline as SVG path d. Arcs become elliptical-arc commands with equal radii;
    positive sweep maps to sweep-flag 1 (clockwise on SVG's y-down canvas).
    """
    parts: list[str] = []
    for cmd in path:
        if isinstance(cmd, MoveTo):
            x, y = cmd.point
            parts.append(f"M {_fmt(x, precision)} {_fmt(y, precision)}")
        elif isinstance(cmd, LineTo):
            x, y = cmd.point
            parts.append(f"L {_fmt(x, precision)} {_fmt(y, precision)}")
        elif isinstance(cmd, ArcTo):
            x, y = cmd.end
            r = _fmt(cmd.radius, precision)
            large = 1 if abs(cmd.sweep_angle) > math.pi else 0
            sweep = 1 if cmd.sweep_angle >= 0 else 0
            parts.append(f"A {r} {r} 0 {large} {sweep} {_fmt(x, precision)} {_fmt(y, precision)}")
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
    return " ".join(parts)


def bubble_svg_element(bubble: Bubble, rect: Rect, margin: float = RENDER_MARGIN) -> ET.Element:
    """Root <svg> element holding one bubble path."""
    shape = bubble.shape
    d = outline_to_svg_d(shape.outer_path(rect))
    vw = max(1.0, rect.width + 2 * margin)
    vh = max(1.0, rect.height + 2 * margin)

    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": _fmt(vw, 2),
            "height": _fmt(vh, 2),
            "viewBox": f"{_fmt(-margin, 2)} {_fmt(-margin, 2)} {_fmt(vw, 2)} {_fmt(vh, 2)}",
        },
    )
    attrs = {
        "d": d,
        "fill": "none" if is_transparent(bubble.color) else bubble.color,
    }
    if shape.style is BubbleStyle.STROKE:
        attrs.update(
            {
                "stroke": "none" if is_transparent(shape.stroke_color) else shape.stroke_color,
                "stroke-width": _fmt(shape.stroke_width, 2),
                "stroke-linejoin": "round",
            }
        )
    ET.SubElement(root, "path", attrs)
    return root


def export_bubble_svg(bubble: Bubble, rect: Rect, out_path: str | Path) -> Path:
    """Write a self-contained SVG for bubble laid out in rect. Returns the written path."""
    root = bubble_svg_element(bubble, rect)
    out_str = ET.tostring(root, encoding="unicode", method="xml")
    out = Path(out_path)
    out.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + out_str, encoding="utf-8")
    logger.debug(f"wrote SVG bubble {rect.width:.2f}x{rect.height:.2f} to {out}")
    return out
