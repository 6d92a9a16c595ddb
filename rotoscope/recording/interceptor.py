"""
Render interception for captured entities.

The interceptor stands in for the entity at the draw call site. While tracing,
each draw renders the entity once into a fresh offscreen surface, stores it,
and blits that same surface to the real target so what is shown is exactly
what was captured.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import pygame

from ..types import Renderable
from .frame_store import Frame, FrameStore
from .state import CaptureState

CaptureCallback = Callable[[Frame, bool], None]


class RenderInterceptor:
    """Renderable decorator that records the wrapped entity's output."""

    def __init__(
        self,
        entity: Renderable,
        state: CaptureState,
        store: FrameStore,
        surface_flags: int = pygame.SRCALPHA,
        on_captured: Optional[CaptureCallback] = None,
    ):
        """
        Args:
            entity: The drawable being captured
            state: Capture state shared with the controller
            store: Destination for captured frames
            surface_flags: Flags for the offscreen surfaces
            on_captured: Called with (frame, auto_stopped) after each capture
        """
        self.entity = entity
        self.state = state
        self.store = store
        self.surface_flags = surface_flags
        self.on_captured = on_captured

    def get_size(self) -> Tuple[int, int]:
        return self.entity.get_size()

    def draw(self, surface: pygame.Surface) -> None:
        if not self.state.tracing:
            self.entity.draw(surface)
            return

        w, h = self.entity.get_size()
        frame_surface = pygame.Surface((int(w), int(h)), self.surface_flags)
        self.entity.draw(frame_surface)

        frame = Frame(frame_surface)
        self.store.append(frame)

        surface.blit(frame_surface, (0, 0))

        stopped = self.state.frame_captured()
        if self.on_captured is not None:
            self.on_captured(frame, stopped)
