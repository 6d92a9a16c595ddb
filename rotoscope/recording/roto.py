"""Rotoscoping for procedurally drawn entities.

Roto captures the frames an entity draws and saves them as pre-rendered
imagetables, either a numbered sequence or a single matrix image.

Limitations:

1. Dither patterns are local to the captured image, so moving the entity
   through one in world space has no effect.
2. Rotations or other transformations applied to the entity from outside its
   draw routine are not captured (those performed inside draw are).
3. Capturing allocates one surface per frame while tracing.

Usage:

    star = PulsingStar()
    roto = Roto(star)
    roto.start_tracing()        # perhaps in response to some event

    # draw roto.renderable wherever star was drawn
    roto.renderable.draw(screen)

    roto.stop_tracing()         # perhaps in response to an event or a timer
    roto.save_as_matrix("~/Desktop")
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config.schema import RotoConfig
from ..errors import InvalidEnvironment
from ..types import Renderable, entity_name
from .base import ImageWriter
from .frame_store import Frame, FrameBounds, FrameStore
from .interceptor import RenderInterceptor
from .matrix import export_matrix
from .sequence import export_sequence
from .state import CaptureState
from .writer import make_writer


class Roto:
    """Capture engine bound to one drawable entity.

    Owns the capture state, the frame store and the render interceptor. The
    entity itself is left untouched; callers draw ``renderable`` in its place.
    """

    def __init__(
        self,
        entity: Renderable,
        config: Optional[RotoConfig] = None,
        writer: Optional[ImageWriter] = None,
    ):
        """Create a Roto capable of tracing frames from entity.

        Args:
            entity: The drawable to rotoscope
            config: Capture configuration (defaults to RotoConfig())
            writer: Image writer; built from config.writer when omitted

        Raises:
            InvalidEnvironment: If config says the host cannot capture
        """
        self.config = config or RotoConfig()
        if not self.config.supports_capture:
            raise InvalidEnvironment(self.config.environment)

        self.entity = entity
        self.name = entity_name(entity)
        self.writer = writer if writer is not None else make_writer(self.config.writer)

        self._logger = logging.getLogger(__name__)

        w, h = entity.get_size()
        self._state = CaptureState()
        self._store = FrameStore(w, h)
        self.renderable = RenderInterceptor(
            entity,
            self._state,
            self._store,
            surface_flags=self.config.surface_flags,
            on_captured=self._frame_captured,
        )

    # ---- state ----

    @property
    def tracing(self) -> bool:
        return self._state.tracing

    @property
    def remaining(self) -> Optional[int]:
        return self._state.remaining

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return self._store.frames

    @property
    def frame_count(self) -> int:
        return len(self._store)

    @property
    def bounds(self) -> FrameBounds:
        return self._store.bounds

    # ---- lifecycle ----

    def start_tracing(self, num_frames: Optional[int] = None) -> None:
        """Begin capturing frames for export.

        Args:
            num_frames: Optional limit on the number of frames to capture
        """
        self._state.start(num_frames)
        if num_frames is not None:
            self._logger.info("Beginning roto capture (%d frames) for %s.", num_frames, self.name)
        else:
            self._logger.info("Beginning roto capture for %s.", self.name)

    def stop_tracing(self) -> None:
        """Stop capturing frames."""
        self._state.stop()
        self._logger.info("Ending roto capture for %s. Captured %d frames.", self.name, len(self._store))

    def reset(self) -> None:
        """Discard captured frames so a brand new sequence can be captured."""
        w, h = self.entity.get_size()
        self._store.clear(w, h)
        self._state.reset()
        self._logger.info("Reset roto capture for %s.", self.name)

    def _frame_captured(self, frame: Frame, stopped: bool) -> None:
        if stopped:
            self._logger.info(
                "Ending roto capture for %s. Captured %d frames.", self.name, len(self._store)
            )

    # ---- export ----

    def save_as_sequence(self, directory: str, prefix: Optional[str] = None) -> List[str]:
        """Save the captured frames as a numbered sequence of images.

        Args:
            directory: Directory to store the sequence in
            prefix: Name for each image file, excluding the numbered table
                suffix and extension. Defaults to the entity's class name.

        Returns:
            Written file paths in capture order
        """
        return export_sequence(
            self._store.frames,
            directory,
            prefix or self.name,
            self.writer,
            image_format=self.config.image_format,
            entity_name=self.name,
        )

    def save_as_matrix(
        self,
        directory: str,
        prefix: Optional[str] = None,
        columns: Optional[int] = None,
    ) -> str:
        """Save the captured frames as a matrix imagetable.

        Args:
            directory: Directory to store the imagetable in
            prefix: Name for the image file, excluding the table suffix and
                extension. Defaults to the entity's class name.
            columns: Frames per row. Approximately square when omitted.

        Returns:
            Path of the written image
        """
        if columns is None:
            columns = self.config.default_columns
        return export_matrix(
            self._store.frames,
            self._store.bounds,
            directory,
            prefix or self.name,
            self.writer,
            columns=columns,
            image_format=self.config.image_format,
            entity_name=self.name,
            surface_flags=self.config.surface_flags,
        )
