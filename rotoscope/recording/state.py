from __future__ import annotations

import enum
from typing import Optional


class CapturePhase(enum.Enum):
    IDLE = "idle"
    TRACING = "tracing"


class CaptureState:
    """Idle/tracing state machine with an optional frame budget.

    frame_captured() is the only transition driven by rendering; it is called
    once per captured frame and performs the automatic stop itself.
    """

    def __init__(self):
        self.phase = CapturePhase.IDLE
        self.remaining: Optional[int] = None

    @property
    def tracing(self) -> bool:
        return self.phase is CapturePhase.TRACING

    def start(self, limit: Optional[int] = None) -> None:
        if limit is not None:
            if isinstance(limit, bool) or int(limit) != limit or limit <= 0:
                raise ValueError(f"Frame limit must be a positive integer, got {limit!r}")
            limit = int(limit)
        self.phase = CapturePhase.TRACING
        self.remaining = limit

    def stop(self) -> None:
        self.phase = CapturePhase.IDLE
        self.remaining = None

    def reset(self) -> None:
        self.stop()

    def frame_captured(self) -> bool:
        """Account for one captured frame.

        Returns:
            True if the frame budget ran out and tracing stopped
        """
        if self.remaining is None:
            return False
        self.remaining -= 1
        if self.remaining <= 0:
            self.stop()
            return True
        return False
