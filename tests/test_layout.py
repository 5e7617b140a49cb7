"""
Tests for the wall layout.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from holdfinder.errors import ConfigurationError, GridLookupError
from holdfinder.models import GridFamily
from holdfinder.wall.layout import WallLayout, column_number
import config


def _build(**overrides):
    kwargs = dict(
        main_columns = config.MAIN_COLUMNS,
        aux_columns  = config.AUX_COLUMNS,
        main_rows    = config.MAIN_ROWS,
        aux_rows     = config.AUX_ROWS,
        main_panels  = config.MAIN_PANELS,
        aux_panels   = config.AUX_PANELS,
        all_rows     = config.ALL_ROWS,
        calibration  = config.COLUMN_CALIBRATION,
    )
    kwargs.update(overrides)
    return WallLayout.build(**kwargs)


class TestWallLayout:

    def test_family_sizes(self, layout):
        main = layout.family(GridFamily.MAIN)
        aux  = layout.family(GridFamily.AUX)

        assert main.column_count == 11
        assert aux.column_count == 10
        assert len(main.rows) == 15
        assert len(aux.rows) == 14

    def test_panel_sizes(self, layout):
        main = layout.family(GridFamily.MAIN)
        aux  = layout.family(GridFamily.AUX)

        assert [len(rows) for _, rows in main.panels] == [5, 5, 5]
        assert [len(rows) for _, rows in aux.panels] == [4, 5, 5]
        assert [name for name, _ in main.panels] == ["TOP", "MIDDLE", "BOTTOM"]

    def test_cells_cover_both_grids(self, layout):
        cells = list(layout.cells())

        assert len(cells) == 15 * 11 + 14 * 10
        assert len(set(cells)) == len(cells)

    def test_every_column_is_calibrated(self, layout):
        for fam in layout.families.values():
            for column in fam.columns:
                assert layout.curve(column).column == column

    def test_family_for_column(self, layout):
        assert layout.family_for_column("C-1").family == GridFamily.MAIN
        assert layout.family_for_column("C-20").family == GridFamily.AUX

    def test_family_for_unknown_column(self, layout):
        with pytest.raises(GridLookupError):
            layout.family_for_column("C-22")


class TestLayoutValidation:

    def test_missing_panel_row(self):
        panels = dict(config.MAIN_PANELS, BOTTOM=["R-15", "R-13", "R-11", "R-9"])
        with pytest.raises(ConfigurationError):
            _build(main_panels=panels)

    def test_row_in_two_panels(self):
        panels = dict(config.AUX_PANELS, TOP=["R-34", "R-32", "R-30", "R-28", "R-26"])
        with pytest.raises(ConfigurationError):
            _build(aux_panels=panels)

    def test_panels_out_of_order(self):
        panels = {
            "TOP":    config.MAIN_PANELS["MIDDLE"],
            "MIDDLE": config.MAIN_PANELS["TOP"],
            "BOTTOM": config.MAIN_PANELS["BOTTOM"],
        }
        with pytest.raises(ConfigurationError):
            _build(main_panels=panels)

    def test_missing_panel_name(self):
        panels = {k: v for k, v in config.MAIN_PANELS.items() if k != "MIDDLE"}
        with pytest.raises(ConfigurationError):
            _build(main_panels=panels)

    def test_wrong_column_parity(self):
        with pytest.raises(ConfigurationError):
            _build(aux_columns=config.AUX_COLUMNS + ["C-23"])

    def test_row_not_on_wall(self):
        with pytest.raises(ConfigurationError):
            _build(all_rows=config.ALL_ROWS[:-1])

    def test_missing_calibration_is_allowed_until_used(self):
        calibration = {k: v for k, v in config.COLUMN_CALIBRATION.items() if k != "C-11"}
        layout = _build(calibration=calibration)

        with pytest.raises(ConfigurationError):
            layout.curve("C-11")


class TestColumnNumber:

    def test_parses_suffix(self):
        assert column_number("C-1") == 1
        assert column_number("C-21") == 21

    @pytest.mark.parametrize("label", ["R-3", "C-", "C-x", "11", ""])
    def test_malformed(self, label):
        with pytest.raises(GridLookupError):
            column_number(label)

    def test_malformed_is_lookup_error(self):
        with pytest.raises(LookupError):
            column_number("X-1")
