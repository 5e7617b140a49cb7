"""
Core data models for Hold Finder.
Split across sub-modules; this __init__ re-exports everything.
"""
from .hold     import GridFamily, HoldRecord
from .position import CalibrationCurve, PixelPosition, RelativePosition, LookupResult

__all__ = [
    "GridFamily", "HoldRecord",
    "CalibrationCurve", "PixelPosition", "RelativePosition", "LookupResult",
]
