"""
Tests for the hold locator session.
"""
import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from holdfinder.dataset import HoldDataset
from holdfinder.locator import HoldLocator
from holdfinder.models import GridFamily, HoldRecord
from holdfinder.render.compositor import HighlightStyle
from holdfinder.render.surface import WallSurface
from holdfinder.wall.layout import WallLayout
import config


class TestLookup:

    def test_known_hold(self, locator):
        result = locator.lookup("1350")

        assert result.found
        assert result.record.cell == ("R-31", "C-11")
        assert result.fields() == {
            "panel":  "TOP",
            "grid":   "Main",
            "column": "6 from the LEFT",
            "row":    "3 from the TOP",
            "angle":  "225",
        }
        assert result.pixel.y == pytest.approx(200.0)
        assert not locator.surface.is_clear()
        assert locator.current is result

    def test_aux_hold(self, locator):
        result = locator.lookup("2110")

        assert result.position.grid_family == GridFamily.AUX
        assert result.fields()["panel"] == "BOTTOM"
        assert result.fields()["row"] == "5 from the TOP"
        assert result.fields()["column"] == "1 from the RIGHT"
        assert result.fields()["angle"] == ""

    def test_query_is_normalized(self, locator):
        result = locator.lookup("  1407b ")
        assert result.hold_id == "1407B"
        assert result.found

    def test_unknown_hold(self, locator, background):
        result = locator.lookup("99999")

        assert not result.found
        assert result.error == 'Hold "99999" not found'
        assert all(v == "" for v in result.fields().values())
        assert np.array_equal(locator.surface.frame, background)

    def test_unknown_hold_clears_previous_highlight(self, locator, background):
        locator.lookup("1350")
        locator.lookup("99999")

        assert np.array_equal(locator.surface.frame, background)
        assert locator.current is None

    def test_empty_query_clears(self, locator):
        locator.lookup("1350")
        result = locator.lookup("   ")

        assert not result.found
        assert result.error is None
        assert locator.surface.is_clear()

    def test_describe_leaves_surface(self, locator):
        current = locator.lookup("1350")
        before = locator.surface.frame.copy()

        result = locator.describe("2110")

        assert result.found
        assert result.fields()["panel"] == "BOTTOM"
        assert np.array_equal(locator.surface.frame, before)
        assert locator.current is current

    def test_describe_unknown_hold(self, locator):
        locator.lookup("1350")
        result = locator.describe("99999")

        assert result.error == 'Hold "99999" not found'
        assert not locator.surface.is_clear()

    def test_clear(self, locator):
        locator.lookup("1350")
        locator.clear()
        assert locator.surface.is_clear()

    def test_every_hold_resolves_and_maps(self, locator, dataset):
        for record in dataset:
            result = locator.lookup(record.hold_id)
            assert result.found, record
            assert result.pixel is not None

    def test_save(self, locator, temp_output_dir):
        locator.lookup("1350")
        path = locator.save(temp_output_dir / "hold.png")
        assert path.exists()


class TestConfigurationErrors:

    @pytest.fixture
    def broken_locator(self, background):
        # C-11 has no calibration entry
        calibration = {k: v for k, v in config.COLUMN_CALIBRATION.items() if k != "C-11"}
        layout = WallLayout.build(
            config.MAIN_COLUMNS, config.AUX_COLUMNS, config.MAIN_ROWS, config.AUX_ROWS,
            config.MAIN_PANELS, config.AUX_PANELS, config.ALL_ROWS, calibration,
        )
        dataset = HoldDataset(layout, [
            HoldRecord("1350", "R-31", "C-11", "225", GridFamily.MAIN),
            HoldRecord("D1", "R-7", "C-1", "90", GridFamily.MAIN),
        ])
        return HoldLocator(layout, dataset, WallSurface(background))

    def test_fields_blank(self, broken_locator):
        result = broken_locator.lookup("1350")

        assert not result.found
        assert "C-11" in result.error
        assert all(v == "" for v in result.fields().values())

    def test_surface_keeps_prior_state(self, broken_locator):
        broken_locator.lookup("D1")
        before = broken_locator.surface.frame.copy()

        broken_locator.lookup("1350")
        assert np.array_equal(broken_locator.surface.frame, before)

    def test_logged(self, broken_locator, capsys):
        broken_locator.lookup("1350")
        assert "[HoldLocator] Configuration error" in capsys.readouterr().out


class TestFromFiles:

    def test_plain_canvas(self, csv_files):
        main_path, aux_path = csv_files
        locator = HoldLocator.from_files(None, main_path, aux_path, style=HighlightStyle.MARKER)

        assert locator.surface.width > 846
        assert locator.compositor.style == HighlightStyle.MARKER
        assert locator.lookup("1350").found

    def test_with_image(self, csv_files, background, temp_output_dir):
        image_path = WallSurface(background).save(temp_output_dir / "wall.png")
        main_path, aux_path = csv_files
        locator = HoldLocator.from_files(image_path, main_path, aux_path)

        assert (locator.surface.width, locator.surface.height) == (880, 1200)
        assert locator.lookup("1350").pixel.y == pytest.approx(200.0)
