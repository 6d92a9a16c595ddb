"""
Image writers for exported frames.

PygameImageWriter saves through pygame.image; PillowImageWriter converts the
surface to a numpy array and saves it with Pillow.
"""

from __future__ import annotations

import logging
import os

import numpy as np
import pygame
from PIL import Image

from .base import ImageWriter

logger = logging.getLogger(__name__)


def _prepare_path(path: str) -> str:
    path = os.path.expanduser(str(path))
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    return path


class PygameImageWriter:
    """Writes surfaces with pygame.image.save."""

    def write(self, surface: pygame.Surface, path: str) -> None:
        out_p = _prepare_path(path)
        pygame.image.save(surface, out_p)
        logger.debug("wrote %dx%d image to %s", surface.get_width(), surface.get_height(), out_p)


class PillowImageWriter:
    """
    Writes surfaces with Pillow.

    Surfaces with per-pixel alpha are saved as RGBA, others as RGB.
    """

    def to_image(self, surface: pygame.Surface) -> Image.Image:
        # surfarray is (W, H, C); Pillow expects (H, W, C)
        rgb = pygame.surfarray.array3d(surface).transpose(1, 0, 2)
        if surface.get_flags() & pygame.SRCALPHA:
            alpha = pygame.surfarray.array_alpha(surface).transpose(1, 0)
            rgba = np.dstack((rgb, alpha)).astype(np.uint8)
            return Image.fromarray(rgba)
        return Image.fromarray(np.ascontiguousarray(rgb, dtype=np.uint8))

    def write(self, surface: pygame.Surface, path: str) -> None:
        out_p = _prepare_path(path)
        self.to_image(surface).save(out_p)
        logger.debug("wrote %dx%d image to %s", surface.get_width(), surface.get_height(), out_p)


def make_writer(name: str = "pygame") -> ImageWriter:
    """Build an image writer by name ("pygame" or "pillow")."""
    key = str(name or "pygame").strip().lower()
    if key == "pygame":
        return PygameImageWriter()
    if key in {"pillow", "pil"}:
        return PillowImageWriter()
    raise ValueError(f"Unknown image writer: {name}")
