from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable

import pygame


@runtime_checkable
class Renderable(Protocol):
    """
    Protocol for drawable entities.

    Anything with a size and a draw routine can be captured: procedural
    sprites, widgets, or the RenderInterceptor wrapping one of them.
    """

    def get_size(self) -> Tuple[int, int]:
        """
        Current size of the entity.

        Returns:
            (width, height) in pixels
        """
        ...

    def draw(self, surface: pygame.Surface) -> None:
        """
        Paint the entity's content with its top-left corner at (0, 0).

        Args:
            surface: Target surface, usually sized to get_size()
        """
        ...


def entity_name(entity: object) -> str:
    # Sprites may carry an explicit class_name; fall back to the Python class.
    name = getattr(entity, "class_name", None)
    if name:
        return str(name)
    return type(entity).__name__
