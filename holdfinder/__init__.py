"""
Hold Finder – source package.

Public API:  all major components are importable directly from `holdfinder`.

    from holdfinder import HoldLocator
    from holdfinder import WallLayout, resolve_relative_position, PixelMapper
    from holdfinder import HoldDataset, WallSurface, HighlightCompositor
    from holdfinder import VoiceAssistant, Exporter
    from holdfinder.models import HoldRecord, RelativePosition, PixelPosition
"""

# ── Session (top-level entry point) ───────────────────────────────────────────
from .locator import HoldLocator

# ── Layout & mapping ──────────────────────────────────────────────────────────
from .wall import WallLayout, FamilyLayout, resolve_relative_position, PixelMapper

# ── Data ──────────────────────────────────────────────────────────────────────
from .dataset import HoldDataset, normalize_hold_id, parse_grid_csv

# ── Rendering ─────────────────────────────────────────────────────────────────
from .render import WallSurface, HighlightCompositor, HighlightStyle

# ── Utilities ─────────────────────────────────────────────────────────────────
from .voice    import VoiceAssistant, SpeechService, ConsoleSpeaker, normalize_spoken_id
from .exporter import Exporter
from .errors   import GridLookupError, HoldNotFoundError, ConfigurationError, DatasetError

# ── Models (data classes) ─────────────────────────────────────────────────────
from .models import (
    GridFamily, HoldRecord,
    CalibrationCurve, PixelPosition, RelativePosition, LookupResult,
)

__all__ = [
    # Session
    "HoldLocator",
    # Layout & mapping
    "WallLayout", "FamilyLayout", "resolve_relative_position", "PixelMapper",
    # Data
    "HoldDataset", "normalize_hold_id", "parse_grid_csv",
    # Rendering
    "WallSurface", "HighlightCompositor", "HighlightStyle",
    # Utilities
    "VoiceAssistant", "SpeechService", "ConsoleSpeaker", "normalize_spoken_id",
    "Exporter",
    "GridLookupError", "HoldNotFoundError", "ConfigurationError", "DatasetError",
    # Models
    "GridFamily", "HoldRecord",
    "CalibrationCurve", "PixelPosition", "RelativePosition", "LookupResult",
]
