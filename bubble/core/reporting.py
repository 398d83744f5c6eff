# bubble/core/reporting.py
"""
Create reports/<run_name>/ and write outline JSON (rect, requested and fitted
params, path commands).
"""

from __future__ import annotations

import json
from pathlib import Path

from bubble.core.config import REPORTS_DIR
from bubble.core.types import (
    ArcTo,
    BubbleParams,
    ClosePath,
    FittedParams,
    LineTo,
    MoveTo,
    OutlinePath,
    PathCommand,
    Rect,
)

SCHEMA_VERSION = "1.0"


def _pt(p: tuple[float, float]) -> dict:
    return {"x": float(p[0]), "y": float(p[1])}


def command_to_dict(cmd: PathCommand) -> dict:
    if isinstance(cmd, MoveTo):
        return {"op": "move_to", "point": _pt(cmd.point)}
    if isinstance(cmd, LineTo):
        return {"op": "line_to", "point": _pt(cmd.point)}
    if isinstance(cmd, ArcTo):
        return {
            "op": "arc_to",
            "center": _pt(cmd.center),
            "radius": float(cmd.radius),
            "start_angle": float(cmd.start_angle),
            "sweep_angle": float(cmd.sweep_angle),
        }
    if isinstance(cmd, ClosePath):
        return {"op": "close"}
    raise TypeError(f"Unknown path command: {type(cmd).__name__}")


def fitted_to_dict(fitted: FittedParams) -> dict:
    return {
        "arrow_height": fitted.arrow_height,
        "border_radius": fitted.border_radius,
        "arrow_width": fitted.arrow_width,
        "position_ratio": fitted.position_ratio,
    }


def outline_to_dict(
    rect: Rect,
    params: BubbleParams,
    fitted: FittedParams,
    path: OutlinePath,
) -> dict:
    """Exact structure for outline.json."""
    return {
        "schema_version": SCHEMA_VERSION,
        "rect": {"width": rect.width, "height": rect.height},
        "params": {
            "direction": params.direction.value,
            "border_radius": params.border_radius,
            "arrow_height": params.arrow_height,
            "arrow_width": params.arrow_width,
            "position_ratio": params.position_ratio,
        },
        "fitted": fitted_to_dict(fitted),
        "commands": [command_to_dict(c) for c in path],
    }


def ensure_report_dir(repo_root: Path, run_name: str) -> Path:
    """Create reports/<run_name>/ under repo_root; return the path."""
    d = repo_root / REPORTS_DIR / run_name
    d.mkdir(parents=True, exist_ok=True)
    return d


def write_outline_json(report_dir: Path, records: list[dict], name: str = "outline.json") -> Path:
    out = report_dir / name
    out.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return out
