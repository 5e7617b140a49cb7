"""
Wall layout – the fixed geometry of the board.

    C-1  C-2  C-3 ...  C-20  C-21
    ●         ●          ●          R-35  ┐
         ○         ○                R-34  │ TOP
    ●         ●          ●          R-33  ┘
    ...                                   MIDDLE
    ●         ●          ●          R-7     BOTTOM

● MAIN grid (odd columns, odd rows)   ○ AUX grid (even columns, even rows)

Both grids share one photo. Rows are interleaved in physical order, columns
never overlap. A WallLayout is built once and passed to the resolver, the
pixel mapper and the compositor; it never changes afterwards.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

from ..errors import ConfigurationError, GridLookupError
from ..models.hold import GridFamily
from ..models.position import CalibrationCurve
import config


@dataclass(frozen=True)
class FamilyLayout:
    """Columns, rows and panel segmentation of one grid family."""
    family: GridFamily
    columns: Tuple[str, ...]
    rows: Tuple[str, ...]
    panels: Tuple[Tuple[str, Tuple[str, ...]], ...]   # (name, rows) in check order

    @property
    def column_count(self) -> int:
        return len(self.columns)


@dataclass(frozen=True)
class WallLayout:
    families: Dict[GridFamily, FamilyLayout]
    all_rows: Tuple[str, ...]                         # physical top → bottom
    calibration: Dict[str, CalibrationCurve] = field(default_factory=dict)

    def __post_init__(self):
        self._validate()

    # ── Construction ───────────────────────────────────────────────────────────

    @classmethod
    def from_config(cls) -> "WallLayout":
        return cls.build(
            main_columns = config.MAIN_COLUMNS,
            aux_columns  = config.AUX_COLUMNS,
            main_rows    = config.MAIN_ROWS,
            aux_rows     = config.AUX_ROWS,
            main_panels  = config.MAIN_PANELS,
            aux_panels   = config.AUX_PANELS,
            all_rows     = config.ALL_ROWS,
            calibration  = config.COLUMN_CALIBRATION,
            panel_order  = config.PANEL_ORDER,
        )

    @classmethod
    def build(
        cls,
        main_columns: Sequence[str],
        aux_columns:  Sequence[str],
        main_rows:    Sequence[str],
        aux_rows:     Sequence[str],
        main_panels:  Mapping[str, Sequence[str]],
        aux_panels:   Mapping[str, Sequence[str]],
        all_rows:     Sequence[str],
        calibration:  Mapping[str, Tuple[float, float]],
        panel_order:  Sequence[str] = ("TOP", "MIDDLE", "BOTTOM"),
    ) -> "WallLayout":
        def _panels(segmentation: Mapping[str, Sequence[str]]):
            missing = [name for name in panel_order if name not in segmentation]
            if missing:
                raise ConfigurationError(f"Panels missing from segmentation: {missing}")
            return tuple((name, tuple(segmentation[name])) for name in panel_order)

        families = {
            GridFamily.MAIN: FamilyLayout(
                GridFamily.MAIN, tuple(main_columns), tuple(main_rows), _panels(main_panels)),
            GridFamily.AUX: FamilyLayout(
                GridFamily.AUX, tuple(aux_columns), tuple(aux_rows), _panels(aux_panels)),
        }
        curves = {
            column: CalibrationCurve(column, float(top), float(bottom))
            for column, (top, bottom) in calibration.items()
        }
        return cls(families=families, all_rows=tuple(all_rows), calibration=curves)

    # ── Lookups ────────────────────────────────────────────────────────────────

    def family(self, family: GridFamily) -> FamilyLayout:
        return self.families[family]

    def family_for_column(self, column: str) -> FamilyLayout:
        """Grid family of a column label, decided by the parity of its number."""
        fam = self.families[GridFamily.from_column_number(column_number(column))]
        if column not in fam.columns:
            raise GridLookupError(f"Unknown column: {column}")
        return fam

    def curve(self, column: str) -> CalibrationCurve:
        try:
            return self.calibration[column]
        except KeyError:
            raise ConfigurationError(f"No calibration for column {column}") from None

    def cells(self):
        """Yield every (row, column) pair that belongs to a grid family."""
        for fam in self.families.values():
            for row in fam.rows:
                for column in fam.columns:
                    yield row, column

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        order = {row: i for i, row in enumerate(self.all_rows)}
        if len(order) != len(self.all_rows):
            raise ConfigurationError("Duplicate row label in physical row order")

        seen_columns: Dict[str, GridFamily] = {}
        for fam in self.families.values():
            for column in fam.columns:
                if column in seen_columns:
                    raise ConfigurationError(
                        f"Column {column} shared by {seen_columns[column].name} and {fam.family.name}")
                if GridFamily.from_column_number(column_number(column)) != fam.family:
                    raise ConfigurationError(
                        f"Column {column} has the wrong parity for {fam.family.name}")
                seen_columns[column] = fam.family
            self._validate_panels(fam, order)

    @staticmethod
    def _validate_panels(fam: FamilyLayout, order: Dict[str, int]) -> None:
        unknown = [row for row in fam.rows if row not in order]
        if unknown:
            raise ConfigurationError(f"{fam.family.name} rows not on the wall: {unknown}")

        flattened: List[str] = [row for _, rows in fam.panels for row in rows]
        if sorted(flattened) != sorted(fam.rows) or len(set(flattened)) != len(flattened):
            raise ConfigurationError(
                f"{fam.family.name} panels must cover every row exactly once")

        # Panels must be contiguous runs of the family's rows, top → bottom
        family_order = sorted(fam.rows, key=order.__getitem__)
        if flattened != family_order:
            raise ConfigurationError(
                f"{fam.family.name} panels are not contiguous in top-to-bottom order")


def column_number(column: str) -> int:
    """Numeric suffix of a column label ("C-11" → 11)."""
    prefix, _, number = column.partition("-")
    if prefix != "C" or not number.isdigit():
        raise GridLookupError(f"Malformed column label: {column!r}")
    return int(number)
