"""
Hold-related data models.
"""
from dataclasses import dataclass
from enum import Enum


class GridFamily(Enum):
    MAIN = "main"     # odd columns
    AUX  = "aux"      # even columns

    @property
    def display_name(self) -> str:
        return self.value.title()

    @classmethod
    def from_column_number(cls, number: int) -> "GridFamily":
        return cls.MAIN if number % 2 == 1 else cls.AUX


@dataclass(frozen=True)
class HoldRecord:
    """One hold and the grid cell it is bolted into."""
    hold_id: str              # normalized (upper-case, trimmed)
    row: str                  # e.g. "R-35"
    column: str               # e.g. "C-11"
    angle: str = ""           # display only
    grid_family: GridFamily = GridFamily.MAIN

    @property
    def cell(self):
        return (self.row, self.column)
