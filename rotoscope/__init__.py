from __future__ import annotations

from .config.schema import RotoConfig
from .errors import InvalidEnvironment, NoFramesCaptured, RotoError
from .recording import Roto
from .types import Renderable

__all__ = [
    "Roto",
    "RotoConfig",
    "Renderable",
    "RotoError",
    "NoFramesCaptured",
    "InvalidEnvironment",
]

__version__ = "0.1.0"
