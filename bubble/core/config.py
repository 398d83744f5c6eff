# bubble/core/config.py
"""
Central configuration for speech-bubble outlines.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Default bubble style -----
DEFAULT_DIRECTION: str = "bottom"
"""Edge the tail protrudes from when none is given."""

DEFAULT_STYLE: str = "fill"

DEFAULT_BORDER_RADIUS: float = 10.0
"""Requested corner radius before fitting."""

DEFAULT_ARROW_HEIGHT: float = 5.0
"""Requested tail protrusion length before fitting."""

DEFAULT_ARROW_WIDTH: float = 8.0
"""Requested tail base width before fitting."""

DEFAULT_POSITION_RATIO: float = 0.5
"""Tail centre along its edge, 0.0 at the edge's start corner."""

# ----- Colours (matplotlib / SVG colour strings) -----
TRANSPARENT: str = "none"
DEFAULT_FILL_COLOR: str = TRANSPARENT
DEFAULT_STROKE_COLOR: str = TRANSPARENT
DEFAULT_STROKE_WIDTH: float = 0.5
SHADOW_COLOR: str = "#000000"

# ----- Elevation -----
DEFAULT_ELEVATION: float = 5.0
"""Elevation used when none is given and the fill colour is visible."""

# ----- Geometry -----
GEOMETRY_TOLERANCE: float = 1e-9
"""Max distance between consecutive command endpoints still counted as continuous."""

CONTAINMENT_TOLERANCE: float = 1e-6
"""Tolerance for outline-inside-rectangle checks."""

ARC_SEGMENTS: int = 16
"""Straight segments per quarter arc when flattening to a polygon."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 400
RENDER_HEIGHT_PX: int = 300
RENDER_MARGIN: float = 10.0
"""Blank border (geometry units) around the bubble in rendered output."""

SVG_COORD_PRECISION: int = 4

# ----- Debug flags -----
BUBBLE_DEBUG: bool = os.environ.get("BUBBLE_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every clamped parameter at WARNING instead of DEBUG. Set env BUBBLE_DEBUG=1 to enable."""

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
