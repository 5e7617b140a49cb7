from .layout       import WallLayout, FamilyLayout, column_number
from .resolver     import resolve_relative_position
from .pixel_mapper import PixelMapper

__all__ = [
    "WallLayout", "FamilyLayout", "column_number",
    "resolve_relative_position",
    "PixelMapper",
]
