"""
Drawing surface – a wall photo plus the frame currently shown on top of it.

All drawing goes through a handful of primitives (clear, draw-image, stroke,
fill-circle, fill-rect, draw-text). Strokes and fills are rasterised into a
single-channel coverage mask first and then alpha-blended onto the frame, so
that a circular region can be clipped out of any stroke before it is blended.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional, Sequence, Tuple
import cv2
import numpy as np

Color = Tuple[int, int, int]
Point = Tuple[float, float]
ClipOut = Tuple[float, float, float]      # (cx, cy, radius) excluded from the stroke


class WallSurface:
    """Background image + current frame (BGR, uint8)."""

    def __init__(self, background: np.ndarray):
        if background is None or background.ndim != 3 or background.shape[2] != 3:
            raise ValueError("Background must be an HxWx3 BGR image")
        self._background = background.astype(np.uint8, copy=True)
        self._background.setflags(write=False)
        self.frame = self._background.copy()

    # ── Construction ───────────────────────────────────────────────────────────

    @classmethod
    def from_file(cls, path) -> "WallSurface":
        image = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if image is None:
            raise FileNotFoundError(f"Could not read wall image: {path}")
        return cls(image)

    @classmethod
    def blank(cls, width: int, height: int, color: Color = (40, 40, 40)) -> "WallSurface":
        image = np.zeros((height, width, 3), dtype=np.uint8)
        image[:] = color
        return cls(image)

    @property
    def background(self) -> np.ndarray:
        return self._background

    @property
    def width(self) -> int:
        return self._background.shape[1]

    @property
    def height(self) -> int:
        return self._background.shape[0]

    def is_clear(self) -> bool:
        return np.array_equal(self.frame, self._background)

    # ── Primitives ─────────────────────────────────────────────────────────────

    def clear(self) -> None:
        """Restore the untouched background."""
        self.draw_image(self._background)

    def draw_image(self, image: np.ndarray, origin: Tuple[int, int] = (0, 0)) -> None:
        x, y = origin
        h = min(image.shape[0], self.height - y)
        w = min(image.shape[1], self.width - x)
        if h <= 0 or w <= 0:
            return
        self.frame[y:y + h, x:x + w] = image[:h, :w]

    def stroke_polyline(
        self,
        points:   Sequence[Point],
        color:    Color,
        width:    int,
        alpha:    float = 1.0,
        dash:     Optional[Tuple[int, int]] = None,
        clip_out: Optional[ClipOut] = None,
    ) -> None:
        pts = np.asarray(points, dtype=np.float64)
        if len(pts) < 2:
            return

        mask = self._new_mask()
        if dash is None:
            cv2.polylines(mask, [_to_int(pts)], False, 255, width, cv2.LINE_AA)
        else:
            for a, b in _dash_segments(pts, dash):
                cv2.line(mask, _to_int_pt(a), _to_int_pt(b), 255, width, cv2.LINE_AA)
        self._blend(mask, color, alpha, clip_out)

    def stroke_line(self, p1: Point, p2: Point, color: Color, width: int, **kwargs) -> None:
        self.stroke_polyline([p1, p2], color, width, **kwargs)

    def stroke_circle(
        self, center: Point, radius: float, color: Color, width: int, alpha: float = 1.0,
    ) -> None:
        mask = self._new_mask()
        cv2.circle(mask, _to_int_pt(center), int(round(radius)), 255, width, cv2.LINE_AA)
        self._blend(mask, color, alpha)

    def fill_circle(
        self, center: Point, radius: float, color: Color, alpha: float = 1.0, blur: int = 0,
    ) -> None:
        """Filled disk. A positive blur feathers the edge (used for glows)."""
        mask = self._new_mask()
        cv2.circle(mask, _to_int_pt(center), int(round(radius)), 255, -1, cv2.LINE_AA)
        if blur > 0:
            k = 2 * blur + 1
            mask = cv2.GaussianBlur(mask, (k, k), 0)
        self._blend(mask, color, alpha)

    def fill_rect(self, p1: Point, p2: Point, color: Color, alpha: float = 1.0) -> None:
        mask = self._new_mask()
        cv2.rectangle(mask, _to_int_pt(p1), _to_int_pt(p2), 255, -1)
        self._blend(mask, color, alpha)

    def draw_text(
        self,
        text:      str,
        origin:    Point,
        color:     Color = (255, 255, 255),
        scale:     float = 0.55,
        thickness: int = 1,
        background: Optional[Color] = None,
    ) -> None:
        """Text with its baseline-left corner at origin, optionally on a filled box."""
        font = cv2.FONT_HERSHEY_SIMPLEX
        x, y = _to_int_pt(origin)
        if background is not None:
            (tw, th), base = cv2.getTextSize(text, font, scale, thickness)
            self.fill_rect((x - 3, y - th - 3), (x + tw + 3, y + base + 1), background)
        cv2.putText(self.frame, text, (x, y), font, scale, color, thickness, cv2.LINE_AA)

    # ── Output ─────────────────────────────────────────────────────────────────

    def save(self, path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        cv2.imwrite(str(path), self.frame)
        return path

    # ── Internals ──────────────────────────────────────────────────────────────

    def _new_mask(self) -> np.ndarray:
        return np.zeros((self.height, self.width), dtype=np.uint8)

    def _blend(
        self, mask: np.ndarray, color: Color, alpha: float, clip_out: Optional[ClipOut] = None,
    ) -> None:
        if clip_out is not None:
            cx, cy, r = clip_out
            cv2.circle(mask, _to_int_pt((cx, cy)), int(round(r)), 0, -1, cv2.LINE_AA)

        weight = mask.astype(np.float32)[..., None] * (alpha / 255.0)
        if not weight.any():
            return
        paint   = np.array(color, dtype=np.float32)
        blended = self.frame.astype(np.float32) * (1.0 - weight) + paint * weight
        self.frame = np.clip(np.rint(blended), 0, 255).astype(np.uint8)


def _to_int_pt(p) -> Tuple[int, int]:
    return (int(round(p[0])), int(round(p[1])))


def _to_int(pts: np.ndarray) -> np.ndarray:
    return np.rint(pts).astype(np.int32).reshape(-1, 1, 2)


def _dash_segments(pts: np.ndarray, dash: Tuple[int, int]):
    """Split a polyline into (start, end) pairs for the 'on' parts of a dash pattern."""
    on, off = dash
    period  = on + off
    if on <= 0 or period <= 0:
        raise ValueError(f"Invalid dash pattern: {dash}")

    segments = []
    travelled = 0.0                     # arc length at the start of the current edge
    for a, b in zip(pts[:-1], pts[1:]):
        length = float(np.hypot(*(b - a)))
        if length == 0:
            continue
        direction = (b - a) / length
        s = 0.0
        while s < length:
            phase = (travelled + s) % period
            if phase < on:
                end = min(length, s + (on - phase))
                segments.append((a + direction * s, a + direction * end))
            else:
                end = min(length, s + (period - phase))
            s = end
        travelled += length
    return segments
