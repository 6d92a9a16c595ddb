from __future__ import annotations

from .schema import RotoConfig

__all__ = ["RotoConfig"]
