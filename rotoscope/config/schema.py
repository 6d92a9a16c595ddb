"""Immutable capture configuration.

The environment check is injected here instead of being read from a global
flag: Roto refuses to attach when supports_capture is False.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Optional

import pygame

CAPTURE_ENVIRONMENTS = frozenset({"simulator", "development", "headless", "test"})
DEVICE_ENVIRONMENTS = frozenset({"device", "production"})


@dataclass(frozen=True)
class RotoConfig:
    """Immutable capture configuration.

    Passed explicitly to Roto so several capture engines can run with
    different settings in the same process.
    """

    # Host environment; only development-style environments can capture
    environment: str = "simulator"

    # Export settings
    image_format: str = "png"
    writer: str = "pygame"
    default_columns: Optional[int] = None

    # Offscreen surface flags for captured frames and matrix tables
    surface_flags: int = pygame.SRCALPHA

    @property
    def supports_capture(self) -> bool:
        env = str(self.environment).strip().lower()
        if env in DEVICE_ENVIRONMENTS:
            return False
        return env in CAPTURE_ENVIRONMENTS

    @classmethod
    def from_env(cls, environ: Optional[dict] = None, **overrides: Any) -> RotoConfig:
        """Create a RotoConfig from ROTO_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Field values that take precedence over the environment

        Returns:
            RotoConfig instance
        """
        env = os.environ if environ is None else environ
        cfg = cls(
            environment=env.get("ROTO_ENVIRONMENT", cls.environment),
            image_format=env.get("ROTO_IMAGE_FORMAT", cls.image_format),
            writer=env.get("ROTO_WRITER", cls.writer),
        )
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(cfg, **overrides) if overrides else cfg
