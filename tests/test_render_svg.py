"""
SVG export: path data for known outlines and stroke/fill attributes.
"""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET

from bubble.core.bubble import Bubble
from bubble.core.path import compute_outline
from bubble.core.render_svg import SVG_NS, export_bubble_svg, outline_to_svg_d
from bubble.core.shape import BubbleShape
from bubble.core.types import ArcTo, BubbleStyle, ClosePath, Direction, LineTo, MoveTo, OutlinePath, Rect


def test_outline_to_svg_d_bottom_bubble() -> None:
    path = compute_outline(Rect(100, 50), Direction.BOTTOM, 10.0, 5.0, 8.0, 0.5)
    d = outline_to_svg_d(path, precision=1)
    assert d == (
        "M 0.0 10.0 A 10.0 10.0 0 0 1 10.0 0.0 L 90.0 0.0 "
        "A 10.0 10.0 0 0 1 100.0 10.0 L 100.0 35.0 "
        "A 10.0 10.0 0 0 1 90.0 45.0 L 54.0 45.0 L 50.0 50.0 L 46.0 45.0 L 10.0 45.0 "
        "A 10.0 10.0 0 0 1 0.0 35.0 Z"
    )


def test_outline_to_svg_d_flags() -> None:
    path = OutlinePath((
        MoveTo((1.0, 0.0)),
        ArcTo((0.0, 0.0), 1.0, 0.0, -1.5 * math.pi),
        LineTo((1.0, 0.0)),
        ClosePath(),
    ))
    d = outline_to_svg_d(path, precision=2)
    assert "A 1.00 1.00 0 1 0 0.00 1.00" in d


def test_export_bubble_svg_stroke(tmp_path) -> None:
    shape = BubbleShape(style=BubbleStyle.STROKE, stroke_color="navy", stroke_width=2.0)
    out = export_bubble_svg(Bubble(shape=shape), Rect(100, 50), tmp_path / "b.svg")
    root = ET.parse(out).getroot()
    assert root.tag == f"{{{SVG_NS}}}svg"
    path_el = root.find(f"{{{SVG_NS}}}path")
    assert path_el is not None
    assert path_el.get("stroke") == "navy"
    assert path_el.get("stroke-width") == "2.00"
    assert path_el.get("stroke-linejoin") == "round"
    assert path_el.get("fill") == "none"
    assert path_el.get("d", "").endswith("Z")


def test_export_bubble_svg_fill_has_no_stroke(tmp_path) -> None:
    bubble = Bubble(shape=BubbleShape(stroke_color="red"), color="#ffcc00")
    out = export_bubble_svg(bubble, Rect(60, 40), tmp_path / "f.svg")
    path_el = ET.parse(out).getroot().find(f"{{{SVG_NS}}}path")
    assert path_el is not None
    assert path_el.get("fill") == "#ffcc00"
    assert path_el.get("stroke") is None
