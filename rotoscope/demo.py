"""Built-in procedural entity used by the command line demo."""

from __future__ import annotations

import math
from typing import Tuple

import pygame

from .draw import draw_poly_outline_rgba, draw_poly_rgba, draw_ring
from .math.util import clamp, hsv_to_rgb, star_points


class PulsingStar:
    """A rotating star whose bounding box shrinks and grows every few frames.

    The changing size exercises matrix cell centring on export.
    """

    class_name = "PulsingStar"

    def __init__(self, size: int = 32, points: int = 5, pulse: int = 6):
        self.base_size = max(4, int(size))
        self.points = max(2, int(points))
        self.pulse = max(1, int(pulse))
        self.tick = 0

    def update(self) -> None:
        self.tick += 1

    def get_size(self) -> Tuple[int, int]:
        # shrink by 2px per step of the pulse, then snap back
        shrink = 2 * (self.tick % self.pulse)
        w = clamp(self.base_size - shrink, 4, self.base_size)
        h = clamp(self.base_size - shrink // 2, 4, self.base_size)
        return (int(w), int(h))

    def draw(self, surface: pygame.Surface) -> None:
        w, h = self.get_size()
        cx, cy = w * 0.5, h * 0.5
        r_outer = min(w, h) * 0.5 - 1
        ang = self.tick * (2.0 * math.pi / 48.0)

        r, g, b = hsv_to_rgb((self.tick % 48) / 48.0, 0.8, 1.0)
        pts = star_points(cx, cy, r_outer, r_outer * 0.45, self.points, ang)
        draw_poly_rgba(surface, pts, (r, g, b, 255))
        draw_poly_outline_rgba(surface, pts, (255, 255, 255, 255), 1)
        draw_ring(surface, cx, cy, int(r_outer * 0.3), (255, 255, 255, 160), 1)
