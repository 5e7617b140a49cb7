from .surface    import WallSurface
from .compositor import HighlightCompositor, HighlightStyle

__all__ = ["WallSurface", "HighlightCompositor", "HighlightStyle"]
