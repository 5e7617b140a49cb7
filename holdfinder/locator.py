"""
Hold locator – the lookup session.

Owns the layout, dataset, pixel mapper, surface and compositor, and runs
one search end to end:

    query → normalize → dataset → (row, column)
                                    ├─ resolver → relative description
                                    └─ mapper   → pixel → compositor → surface

A hold that is not in the dataset clears the highlight. A layout error
(missing band or calibration) skips the draw and leaves the surface as it
was. In both cases the result carries no description fields.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple

from .dataset import HoldDataset, normalize_hold_id
from .errors import ConfigurationError, GridLookupError, HoldNotFoundError
from .models.position import LookupResult
from .render.compositor import HighlightCompositor, HighlightStyle
from .render.surface import WallSurface
from .wall.layout import WallLayout
from .wall.pixel_mapper import PixelMapper
from .wall.resolver import resolve_relative_position
import config


class HoldLocator:
    """Single lookup session shared by the text prompt and the voice layer."""

    def __init__(
        self,
        layout:  WallLayout,
        dataset: HoldDataset,
        surface: WallSurface,
        style:   HighlightStyle = HighlightStyle(config.HIGHLIGHT_STYLE),
    ):
        self.layout     = layout
        self.dataset    = dataset
        self.surface    = surface
        self.mapper     = PixelMapper(layout, surface.width, surface.height)
        self.compositor = HighlightCompositor(self.mapper, style=style)
        self.current: Optional[LookupResult] = None

    @classmethod
    def from_files(
        cls,
        image_path: Optional[Path] = None,
        main_csv:   Path = config.MAIN_GRID_CSV,
        aux_csv:    Path = config.AUX_GRID_CSV,
        style:      HighlightStyle = HighlightStyle(config.HIGHLIGHT_STYLE),
    ) -> "HoldLocator":
        """Build a session from the grid exports and the wall photo."""
        layout  = WallLayout.from_config()
        dataset = HoldDataset.load(layout, main_csv, aux_csv)
        if image_path is not None:
            surface = WallSurface.from_file(image_path)
        else:
            # No photo: a plain canvas wide enough for the calibrated columns
            width   = int(max(max(c.top_x, c.bottom_x) for c in layout.calibration.values())) + 40
            surface = WallSurface.blank(width, int(width * 1.35))
        print(f"[HoldLocator] Surface {surface.width}x{surface.height}, style={style.value}")
        return cls(layout, dataset, surface, style=style)

    # ── Search ─────────────────────────────────────────────────────────────────

    def lookup(self, query: str) -> LookupResult:
        """Find, describe and highlight a hold. Never raises for user input."""
        result, layout_error = self._resolve(query)
        if result.found:
            self.compositor.render(self.surface, result.pixel)
            self.current = result
        elif not layout_error:
            self.clear()
        return result

    def describe(self, query: str) -> LookupResult:
        """Same as lookup() but leaves the surface and the current hold alone."""
        result, _ = self._resolve(query)
        return result

    def _resolve(self, query: str) -> Tuple[LookupResult, bool]:
        """Result for a query, plus whether it failed on the layout itself."""
        hold_id = normalize_hold_id(query)
        result  = LookupResult(query=query, hold_id=hold_id)
        if not hold_id:
            return result, False

        try:
            record   = self.dataset.find(hold_id)
            position = resolve_relative_position(self.layout, record.row, record.column)
            pixel    = self.mapper.map_to_pixel(record.row, record.column)
        except ConfigurationError as e:
            print(f"[HoldLocator] Configuration error for hold {hold_id}: {e}")
            result.error = str(e)
            return result, True
        except (HoldNotFoundError, GridLookupError) as e:
            result.error = str(e)
            return result, False

        result.record, result.position, result.pixel = record, position, pixel
        return result, False

    def clear(self) -> None:
        """Remove any highlight and forget the current hold."""
        self.compositor.render(self.surface, None)
        self.current = None

    def save(self, path) -> Path:
        return self.surface.save(path)
