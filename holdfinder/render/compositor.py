"""
Highlight compositor – draws the located hold on top of the wall photo.

Two presentations are available; a compositor uses exactly one of them.

  crosshair (default)
      curved column band + straight row band, both with a circular cutout
      around the hold, closed off by a ring just outside the cutout.

  marker
      dashed straight column/row guides, a glowing red disk with a white
      core on the hold, and optional row/column labels.

Every render starts from the clean background, so the last call wins and
no stale highlight survives.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional

from ..errors import ConfigurationError
from ..models.position import PixelPosition
from ..wall.pixel_mapper import PixelMapper
from .surface import WallSurface
import config


class HighlightStyle(Enum):
    CROSSHAIR = "crosshair"
    MARKER    = "marker"


class HighlightCompositor:
    """Issues drawing operations for one highlighted hold."""

    def __init__(
        self,
        mapper:        PixelMapper,
        style:         HighlightStyle = HighlightStyle(config.HIGHLIGHT_STYLE),
        line_width:    int   = config.HIGHLIGHT_WIDTH,
        cutout_radius: float = config.CUTOUT_RADIUS,
        ring_radius:   float = config.RING_RADIUS,
        curve_steps:   int   = config.COLUMN_CURVE_STEPS,
        show_labels:   bool  = config.MARKER_LABELS,
    ):
        # The ring has to sit outside the ends of the indicator strokes
        if ring_radius <= cutout_radius + line_width / 2:
            raise ConfigurationError(
                f"Ring radius {ring_radius} must exceed cutout {cutout_radius} "
                f"+ half line width {line_width / 2}")
        self.mapper        = mapper
        self.style         = style
        self.line_width    = line_width
        self.cutout_radius = cutout_radius
        self.ring_radius   = ring_radius
        self.curve_steps   = curve_steps
        self.show_labels   = show_labels

    # ── Public API ─────────────────────────────────────────────────────────────

    def render(self, surface: WallSurface, position: Optional[PixelPosition]) -> None:
        """Redraw the surface; highlight position if given, otherwise just clear."""
        if (surface.width, surface.height) != (self.mapper.width, self.mapper.height):
            raise ConfigurationError(
                f"Surface is {surface.width}x{surface.height} but the mapper was built "
                f"for {self.mapper.width}x{self.mapper.height}")

        surface.clear()
        if position is None:
            return

        if self.style == HighlightStyle.CROSSHAIR:
            self._draw_crosshair(surface, position)
        else:
            self._draw_marker(surface, position)

    # ── Crosshair ──────────────────────────────────────────────────────────────

    def _draw_crosshair(self, surface: WallSurface, pos: PixelPosition) -> None:
        cutout = (pos.x, pos.y, self.cutout_radius)

        # Column follows its calibration curve rather than a vertical line
        column_pts = self.mapper.sample_column(pos.column, self.curve_steps)
        surface.stroke_polyline(column_pts, config.COLUMN_COLOR, self.line_width,
                                alpha=config.HIGHLIGHT_ALPHA, clip_out=cutout)

        surface.stroke_line((0, pos.y), (surface.width, pos.y), config.ROW_COLOR,
                            self.line_width, alpha=config.HIGHLIGHT_ALPHA, clip_out=cutout)

        surface.stroke_circle((pos.x, pos.y), self.ring_radius, config.RING_COLOR,
                              self.line_width, alpha=config.HIGHLIGHT_ALPHA)

    # ── Marker ─────────────────────────────────────────────────────────────────

    def _draw_marker(self, surface: WallSurface, pos: PixelPosition) -> None:
        w, h = surface.width, surface.height
        surface.stroke_line((pos.x, 0), (pos.x, h), config.COLUMN_COLOR,
                            config.MARKER_LINE_WIDTH, dash=config.MARKER_DASH)
        surface.stroke_line((0, pos.y), (w, pos.y), config.ROW_COLOR,
                            config.MARKER_LINE_WIDTH, dash=config.MARKER_DASH)

        # glow, red disk, white core
        center = (pos.x, pos.y)
        surface.fill_circle(center, config.MARKER_RADIUS, config.MARKER_COLOR,
                            alpha=0.8, blur=config.MARKER_GLOW_RADIUS)
        surface.fill_circle(center, config.MARKER_RADIUS, config.MARKER_COLOR,
                            alpha=config.MARKER_ALPHA)
        surface.fill_circle(center, config.MARKER_CORE_RADIUS, config.MARKER_CORE_COLOR,
                            alpha=config.MARKER_CORE_ALPHA)

        if self.show_labels:
            self._draw_labels(surface, pos)

    def _draw_labels(self, surface: WallSurface, pos: PixelPosition) -> None:
        dark = (20, 20, 20)
        # Column label at the top edge, row label at the left edge
        surface.draw_text(pos.column, (pos.x + 6, 20), config.COLUMN_COLOR,
                          config.FONT_SCALE, config.FONT_THICKNESS, background=dark)
        surface.draw_text(pos.row, (6, pos.y - 8), config.ROW_COLOR,
                          config.FONT_SCALE, config.FONT_THICKNESS, background=dark)
