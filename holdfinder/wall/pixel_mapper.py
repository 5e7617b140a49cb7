"""
Pixel mapper – logical grid cell → pixel on the wall photo.

Y comes from evenly spaced row bands: the 29 physical rows are spread over
the image height with one spacing of margin above the first and below the
last row. Physical row spacing is assumed uniform.

X is not constant down a column. The photo is keystoned, so each column is
a slanted line described by its calibration curve (X at the top edge and
X at the bottom edge). X is interpolated at the row's own Y, and the curved
column indicator resamples the same interpolation down the whole image.
"""
from __future__ import annotations
from typing import Dict
import numpy as np

from ..errors import ConfigurationError
from ..models.position import PixelPosition
from .layout import WallLayout


class PixelMapper:
    """Maps cells to pixels for one surface size. Tables are built once."""

    def __init__(self, layout: WallLayout, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.layout = layout
        self.width  = width
        self.height = height
        self._bands = self._build_row_bands()

    # ── Tables ─────────────────────────────────────────────────────────────────

    def _build_row_bands(self) -> Dict[str, float]:
        rows    = self.layout.all_rows
        spacing = self.height / (len(rows) + 1)
        return {row: (i + 1) * spacing for i, row in enumerate(rows)}

    @property
    def row_bands(self) -> Dict[str, float]:
        return dict(self._bands)

    # ── Mapping ────────────────────────────────────────────────────────────────

    def row_y(self, row: str) -> float:
        try:
            return self._bands[row]
        except KeyError:
            raise ConfigurationError(f"No row band for row {row}") from None

    def column_x(self, column: str, y: float) -> float:
        """Interpolated X of a column at height y."""
        curve = self.layout.curve(column)
        return curve.x_at(y / self.height)

    def map_to_pixel(self, row: str, column: str) -> PixelPosition:
        """
        Pixel position of a cell.

        Raises:
            ConfigurationError: no band for the row or no calibration for the column.
        """
        y = self.row_y(row)
        x = self.column_x(column, y)
        return PixelPosition(row=row, column=column, x=x, y=y)

    def sample_column(self, column: str, steps: int) -> np.ndarray:
        """
        Points along a column from the top edge to the bottom edge.

        Returns:
            (steps + 1, 2) float array of (x, y).
        """
        if steps < 1:
            raise ValueError("steps must be >= 1")
        curve = self.layout.curve(column)
        t  = np.linspace(0.0, 1.0, steps + 1)
        xs = curve.top_x + t * (curve.bottom_x - curve.top_x)
        return np.column_stack([xs, t * self.height])
