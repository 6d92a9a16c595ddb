"""Exceptions raised by the capture engine.

Renderer, surface allocation and image writer failures are not wrapped here;
they propagate to the caller as-is.
"""

from __future__ import annotations

from typing import Optional


class RotoError(Exception):
    """Base class for rotoscope errors."""


class NoFramesCaptured(RotoError):
    """Raised when an export is requested before any frame was captured."""

    def __init__(self, entity_name: Optional[str] = None):
        self.entity_name = entity_name or "entity"
        super().__init__(f"No frames from {self.entity_name} have been captured for export.")


class InvalidEnvironment(RotoError):
    """Raised at construction when the host cannot render offscreen or write files."""

    def __init__(self, environment: str):
        self.environment = environment
        super().__init__(
            f"Roto should only be used in a development environment (got {environment!r})."
        )
