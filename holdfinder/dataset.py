"""
Hold dataset – hold id → grid cell, loaded from the two grid CSV exports.

Each export repeats a pair of rows for every wall row:

    Hold #, 1350, 1351, ..., 1360, R-35      ← hold ids, then the row label
    Angle,    90,  180, ...,  270            ← angle of the hold above it

The first cell is a label, the next N cells line up with the family's N
columns, and cell N + 1 names the wall row. Cells exported with a
line-number marker ("12→1350") have the marker stripped. Anything that does
not fit (blank ids, unknown row labels, truncated rows) is skipped.
"""
from __future__ import annotations
import csv
import io
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from .errors import DatasetError, HoldNotFoundError
from .models.hold import GridFamily, HoldRecord
from .wall.layout import WallLayout
import config


# "12→" as exported, or its mis-decoded UTF-8 form "12â†’"
_LINE_MARKER = re.compile(r"^\d+(?:→|â†’)")


def normalize_hold_id(text: str) -> str:
    """Lookup key for a hold id: trimmed and upper-cased ("d12b " → "D12B")."""
    return text.strip().upper()


class HoldDataset:
    """Read-only hold lookup built once from the grid exports."""

    def __init__(self, layout: WallLayout, records: Iterable[HoldRecord] = ()):
        self.layout = layout
        self._holds: Dict[str, HoldRecord] = {}
        for record in records:
            self._holds[record.hold_id] = record

    # ── Loading ────────────────────────────────────────────────────────────────

    @classmethod
    def load(
        cls,
        layout:   WallLayout,
        main_csv: Path = config.MAIN_GRID_CSV,
        aux_csv:  Path = config.AUX_GRID_CSV,
    ) -> "HoldDataset":
        records: List[HoldRecord] = []
        for family, path in ((GridFamily.MAIN, main_csv), (GridFamily.AUX, aux_csv)):
            try:
                text = Path(path).read_text(encoding="utf-8")
            except OSError as e:
                raise DatasetError(f"Could not read {family.display_name} grid: {path} ({e})") from e
            records.extend(parse_grid_csv(text, family, layout))

        dataset = cls(layout, records)
        print(f"[HoldDataset] Loaded {len(dataset)} holds "
              f"({dataset.count(GridFamily.MAIN)} main, {dataset.count(GridFamily.AUX)} aux)")
        return dataset

    # ── Lookup ─────────────────────────────────────────────────────────────────

    def find(self, hold_id: str) -> HoldRecord:
        """
        Record for a hold id (matched case-insensitively).

        Raises:
            HoldNotFoundError: id is not in the dataset.
        """
        key = normalize_hold_id(hold_id)
        try:
            return self._holds[key]
        except KeyError:
            raise HoldNotFoundError(key) from None

    def get(self, hold_id: str) -> Optional[HoldRecord]:
        return self._holds.get(normalize_hold_id(hold_id))

    def hold_ids(self) -> List[str]:
        return list(self._holds)

    def count(self, family: GridFamily) -> int:
        return sum(1 for r in self._holds.values() if r.grid_family == family)

    def __len__(self) -> int:
        return len(self._holds)

    def __contains__(self, hold_id: str) -> bool:
        return normalize_hold_id(hold_id) in self._holds

    def __iter__(self) -> Iterator[HoldRecord]:
        return iter(self._holds.values())


def parse_grid_csv(text: str, family: GridFamily, layout: WallLayout) -> List[HoldRecord]:
    """Parse one grid export into HoldRecords, skipping malformed rows."""
    fam     = layout.family(family)
    columns = fam.columns
    rows    = [[_clean_cell(c) for c in r] for r in csv.reader(io.StringIO(text.strip()))]

    records: List[HoldRecord] = []
    i = 0
    while i < len(rows):
        hold_row = rows[i]
        if not any(config.HOLD_ROW_MARKER in cell for cell in hold_row):
            i += 1
            continue

        angle_row = rows[i + 1] if i + 1 < len(rows) else []
        row_label = hold_row[len(columns) + 1] if len(hold_row) > len(columns) + 1 else ""

        if row_label in fam.rows:
            for col_index, column in enumerate(columns):
                hold_id = _cell(hold_row, col_index + 1)
                if not hold_id or hold_id == config.HOLD_ROW_MARKER:
                    continue
                records.append(HoldRecord(
                    hold_id     = normalize_hold_id(hold_id),
                    row         = row_label,
                    column      = column,
                    angle       = _cell(angle_row, col_index + 1),
                    grid_family = family,
                ))
        i += 2      # the angle row has been consumed
    return records


def _clean_cell(cell: str) -> str:
    return _LINE_MARKER.sub("", cell).strip()


def _cell(row: List[str], index: int) -> str:
    return row[index] if index < len(row) else ""
