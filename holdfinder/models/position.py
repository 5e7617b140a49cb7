"""
Position and lookup result models.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from .hold import GridFamily, HoldRecord


@dataclass(frozen=True)
class CalibrationCurve:
    """
    Measured X pixel of a column where it crosses the top and bottom edge of
    the wall photo. Columns are straight lines in the photo but not vertical.
    """
    column: str
    top_x: float
    bottom_x: float

    def x_at(self, t: float) -> float:
        """X at normalized height t (0 = top edge, 1 = bottom edge)."""
        return self.top_x + t * (self.bottom_x - self.top_x)


@dataclass(frozen=True)
class PixelPosition:
    row: str
    column: str
    x: float
    y: float


@dataclass(frozen=True)
class RelativePosition:
    """Human-readable location of a cell on the wall."""
    panel: str                # TOP / MIDDLE / BOTTOM
    grid_family: GridFamily
    row_ordinal: int          # 1-based, counted from the top of the panel
    column_ordinal: int       # 1-based, counted from column_side
    column_side: str          # LEFT / RIGHT

    @property
    def grid_name(self) -> str:
        return self.grid_family.display_name

    @property
    def row_text(self) -> str:
        return f"{self.row_ordinal} from the TOP"

    @property
    def column_text(self) -> str:
        return f"{self.column_ordinal} from the {self.column_side}"


@dataclass
class LookupResult:
    """Outcome of a single hold search."""
    query: str
    hold_id: str = ""
    record: Optional[HoldRecord] = None
    position: Optional[RelativePosition] = None
    pixel: Optional[PixelPosition] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.error is None and self.position is not None

    def fields(self) -> Dict[str, str]:
        """Display fields; all blank unless the lookup fully succeeded."""
        if not self.found:
            return {"panel": "", "grid": "", "column": "", "row": "", "angle": ""}
        return {
            "panel":  self.position.panel,
            "grid":   self.position.grid_name,
            "column": self.position.column_text,
            "row":    self.position.row_text,
            "angle":  self.record.angle,
        }

    def to_dict(self) -> dict:
        return {
            "query":   self.query,
            "hold_id": self.hold_id,
            "found":   self.found,
            "error":   self.error,
            "cell":    list(self.record.cell) if self.record else None,
            "pixel":   [self.pixel.x, self.pixel.y] if self.pixel else None,
            **self.fields(),
        }
