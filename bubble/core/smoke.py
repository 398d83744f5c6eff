# bubble/core/smoke.py
"""
Single entrypoint to verify outlines end-to-end: one bubble per direction,
written as JSON, SVG and PNG under reports/smoke/. Does not run on import.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bubble.core.bubble import Bubble
from bubble.core.config import LOG_LEVEL
from bubble.core.render import render_bubble_png
from bubble.core.render_svg import export_bubble_svg
from bubble.core.reporting import ensure_report_dir, outline_to_dict, write_outline_json
from bubble.core.shape import BubbleShape
from bubble.core.types import BubbleStyle, Direction, Rect
from bubble.core.validate import validate_outline, validate_outline_inside_rect

logger = logging.getLogger(__name__)


def main() -> None:
    """Render every direction in both styles with run_name='smoke'."""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    repo_root = Path.cwd().resolve()
    report_dir = ensure_report_dir(repo_root, "smoke")
    rect = Rect(160.0, 90.0)

    records: list[dict] = []
    for direction in Direction:
        for style in BubbleStyle:
            shape = BubbleShape(
                style=style,
                direction=direction,
                stroke_color="navy",
                stroke_width=1.5,
                position_ratio=0.3,
                arrow_height=12.0,
                arrow_width=16.0,
            )
            bubble = Bubble(shape=shape, color="lightblue" if style is BubbleStyle.FILL else "none")
            path = shape.outer_path(rect)

            ok, problems = validate_outline(path)
            if not ok:
                raise ValueError(f"{direction.value}/{style.value}: {problems}")
            inside, overflow = validate_outline_inside_rect(path, rect)
            if not inside:
                raise ValueError(f"{direction.value}/{style.value}: outline overflows rect by {overflow:.4f}")

            records.append(outline_to_dict(rect, shape.params, shape.fit(rect), path))
            stem = f"bubble_{direction.value}_{style.value}"
            export_bubble_svg(bubble, rect, report_dir / f"{stem}.svg")
            render_bubble_png(bubble, rect, report_dir / f"{stem}.png")
            logger.info(f"smoke: wrote {stem}")

    write_outline_json(report_dir, records)


if __name__ == "__main__":
    main()
