# bubble/core/render.py
"""
Matplotlib rendering: outline to matplotlib Path, fill and stroke passes,
PNG export. Axes are y-down to match outline coordinates.
"""

from __future__ import annotations

import logging
import math
import warnings
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import PathPatch
from matplotlib.path import Path as MplPath
from matplotlib.transforms import Affine2D

from bubble.core.bubble import Bubble, is_transparent
from bubble.core.config import RENDER_HEIGHT_PX, RENDER_MARGIN, RENDER_WIDTH_PX
from bubble.core.types import ArcTo, BubbleStyle, ClosePath, LineTo, MoveTo, OutlinePath, Rect

logger = logging.getLogger(__name__)


def _arc_to_mpl(arc: ArcTo) -> tuple[np.ndarray, list[int]]:
    """Cubic Bezier vertices and codes for arc, first vertex as LINETO."""
    theta1 = math.degrees(arc.start_angle)
    theta2 = math.degrees(arc.start_angle + arc.sweep_angle)
    if arc.sweep_angle >= 0:
        unit = MplPath.arc(theta1, theta2)
        verts = unit.vertices
    else:
        unit = MplPath.arc(theta2, theta1)
        verts = unit.vertices[::-1]
    verts = Affine2D().scale(arc.radius).translate(*arc.center).transform(verts)
    verts[0] = arc.start
    verts[-1] = arc.end
    codes = [MplPath.LINETO] + [MplPath.CURVE4] * (len(verts) - 1)
    return verts, codes


def outline_to_mpl_path(path: OutlinePath) -> MplPath:
    """Convert outline commands to a single matplotlib Path."""
    verts: list[np.ndarray] = []
    codes: list[int] = []
    start = path.start or (0.0, 0.0)
    for cmd in path:
        if isinstance(cmd, MoveTo):
            verts.append(np.array([cmd.point], dtype=float))
            codes.append(MplPath.MOVETO)
            start = cmd.point
        elif isinstance(cmd, LineTo):
            verts.append(np.array([cmd.point], dtype=float))
            codes.append(MplPath.LINETO)
        elif isinstance(cmd, ArcTo):
            v, c = _arc_to_mpl(cmd)
            verts.append(v)
            codes.extend(c)
        elif isinstance(cmd, ClosePath):
            verts.append(np.array([start], dtype=float))
            codes.append(MplPath.CLOSEPOLY)
    if not verts:
        return MplPath(np.zeros((0, 2)))
    return MplPath(np.vstack(verts), codes)


def stroke_path(ax: plt.Axes, path: OutlinePath, color: str, width: float) -> PathPatch:
    """Stroke path with round joins; no fill."""
    patch = PathPatch(
        outline_to_mpl_path(path),
        facecolor="none",
        edgecolor=color,
        linewidth=width,
        joinstyle="round",
        zorder=3,
    )
    ax.add_patch(patch)
    return patch


def fill_path(ax: plt.Axes, path: OutlinePath, color: str) -> PathPatch:
    patch = PathPatch(outline_to_mpl_path(path), facecolor=color, edgecolor="none", zorder=2)
    ax.add_patch(patch)
    return patch


def paint_bubble(ax: plt.Axes, bubble: Bubble, rect: Rect) -> list[PathPatch]:
    """
    Fill the outline with the bubble colour, then stroke it when the style is
    stroke. Transparent passes are skipped.
    """
    shape = bubble.shape
    path = shape.outer_path(rect)
    patches: list[PathPatch] = []
    if not is_transparent(bubble.color):
        patches.append(fill_path(ax, path, bubble.color))
    if shape.style is BubbleStyle.STROKE and not is_transparent(shape.stroke_color):
        patches.append(stroke_path(ax, path, shape.stroke_color, shape.stroke_width))
    return patches


def set_axes_to_rect(ax: plt.Axes, rect: Rect, margin: float = RENDER_MARGIN) -> None:
    """Set limits to rect plus margin, y-down, equal aspect; hide axes."""
    ax.set_xlim(-margin, rect.width + margin)
    ax.set_ylim(rect.height + margin, -margin)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.axis("off")
    return fig, ax


def render_bubble_png(
    bubble: Bubble,
    rect: Rect,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render one bubble on white. scale multiplies output resolution (1x, 2x, 4x)."""
    w, h = width_px * scale, height_px * scale
    fig, ax = _new_fig(w, h)
    try:
        patches = paint_bubble(ax, bubble, rect)
        if not patches:
            logger.debug("render_bubble_png: fill and stroke both transparent; image is blank")
        set_axes_to_rect(ax, rect)
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
            fig.savefig(output_path, dpi=100, facecolor="white")
    finally:
        plt.close(fig)
