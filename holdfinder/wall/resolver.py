"""
Relative position resolver.

Turns an absolute grid cell into the description a climber actually uses
on the wall: which panel, how many rows down from the top of that panel,
and how many columns in from the nearer side.
"""
from __future__ import annotations

from ..errors import GridLookupError
from ..models.position import RelativePosition
from .layout import WallLayout


def resolve_relative_position(layout: WallLayout, row: str, column: str) -> RelativePosition:
    """
    Describe a (row, column) cell relative to its panel and grid.

    Raises:
        GridLookupError: column or row is not part of the layout, or the row
            does not belong to the column's grid family.
    """
    fam = layout.family_for_column(column)

    panel, row_ordinal = None, 0
    for name, rows in fam.panels:
        if row in rows:
            panel, row_ordinal = name, rows.index(row) + 1
            break
    if panel is None:
        raise GridLookupError(f"Row {row} is not part of the {fam.family.display_name} grid")

    from_left  = fam.columns.index(column) + 1
    from_right = fam.column_count - from_left + 1

    # Ties go LEFT (middle column of the 11-wide MAIN grid is "6 from the LEFT")
    if from_left <= from_right:
        ordinal, side = from_left, "LEFT"
    else:
        ordinal, side = from_right, "RIGHT"

    return RelativePosition(
        panel          = panel,
        grid_family    = fam.family,
        row_ordinal    = row_ordinal,
        column_ordinal = ordinal,
        column_side    = side,
    )
