"""
Ordered storage for captured frames.

Frames are only ever appended or wholly cleared. The store also keeps the
running minimum and maximum frame size, seeded from the entity's size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import pygame


@dataclass(frozen=True)
class Frame:
    """One captured image."""

    surface: pygame.Surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()


@dataclass(frozen=True)
class FrameBounds:
    min_width: int
    max_width: int
    min_height: int
    max_height: int

    @classmethod
    def seeded(cls, width: int, height: int) -> FrameBounds:
        return cls(width, width, height, height)

    def widened(self, width: int, height: int) -> FrameBounds:
        return FrameBounds(
            min_width=min(self.min_width, width),
            max_width=max(self.max_width, width),
            min_height=min(self.min_height, height),
            max_height=max(self.max_height, height),
        )


class FrameStore:
    """Append-only frame buffer with running size bounds."""

    def __init__(self, width: int, height: int):
        self._frames: List[Frame] = []
        self._bounds = FrameBounds.seeded(width, height)

    def append(self, frame: Frame) -> None:
        self._frames.append(frame)
        self._bounds = self._bounds.widened(frame.width, frame.height)

    def clear(self, width: int, height: int) -> None:
        """Drop all frames and reseed the bounds from the given size."""
        self._frames = []
        self._bounds = FrameBounds.seeded(width, height)

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def bounds(self) -> FrameBounds:
        return self._bounds

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(tuple(self._frames))

    def __bool__(self) -> bool:
        return bool(self._frames)
