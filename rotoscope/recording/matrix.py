"""
Matrix imagetable export.

Packs all captured frames into a single grid surface with uniform cells, one
frame per cell in capture order, left to right then top to bottom. Frames
smaller than the cell are centred in it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pygame

from ..errors import NoFramesCaptured
from .base import ImageWriter
from .frame_store import Frame, FrameBounds
from .utils import matrix_filename, normalize_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatrixLayout:
    """Grid geometry for a matrix imagetable."""

    columns: int
    rows: int
    cell_width: int
    cell_height: int

    @property
    def width(self) -> int:
        return self.columns * self.cell_width

    @property
    def height(self) -> int:
        return self.rows * self.cell_height

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def cell_origin(self, index: int) -> Tuple[int, int]:
        """
        Top-left corner of the cell for a frame.

        Args:
            index: 0-based frame index

        Returns:
            (x, y) of the cell
        """
        r = index // self.columns
        c = index - r * self.columns
        return (c * self.cell_width, r * self.cell_height)

    def frame_position(self, index: int, frame_width: int, frame_height: int) -> Tuple[int, int]:
        """Draw position for a frame, centred when smaller than the cell."""
        x, y = self.cell_origin(index)
        x += (self.cell_width - int(frame_width)) // 2
        y += (self.cell_height - int(frame_height)) // 2
        return (x, y)


def compute_layout(
    frame_count: int,
    max_width: float,
    max_height: float,
    columns: Optional[int] = None,
) -> MatrixLayout:
    """
    Determine the table and cell size for a set of frames.

    Args:
        frame_count: Number of frames to place (must be positive)
        max_width: Largest captured frame width
        max_height: Largest captured frame height
        columns: Frames per row; an approximately square grid when omitted

    Returns:
        MatrixLayout for the frames
    """
    if frame_count <= 0:
        raise ValueError(f"frame_count must be positive, got {frame_count}")

    if columns is None or int(columns) <= 0:
        columns = int(math.floor(math.sqrt(frame_count)))
    columns = max(1, int(columns))
    rows = int(math.ceil(frame_count / columns))

    return MatrixLayout(
        columns=columns,
        rows=rows,
        cell_width=int(math.floor(max_width)),
        cell_height=int(math.floor(max_height)),
    )


def copy_surface(dst: pygame.Surface, src: pygame.Surface, pos: Tuple[int, int]) -> None:
    """Copy src into dst at pos without blending.

    Colour is always replaced. Alpha is replaced too when dst has per-pixel
    alpha; a dst without it keeps only the colour of src.
    """
    x, y = int(pos[0]), int(pos[1])
    if not (src.get_flags() & pygame.SRCALPHA):
        dst.blit(src, (x, y))
        return

    # clip to the destination, the cell may be smaller than an oversize frame
    area = pygame.Rect(x, y, src.get_width(), src.get_height()).clip(dst.get_rect())
    if area.width <= 0 or area.height <= 0:
        return
    sx, sy = area.x - x, area.y - y

    rgb = pygame.surfarray.array3d(src)[sx:sx + area.width, sy:sy + area.height]

    dst_rgb = pygame.surfarray.pixels3d(dst)
    dst_rgb[area.x:area.right, area.y:area.bottom] = rgb
    del dst_rgb
    if not (dst.get_flags() & pygame.SRCALPHA):
        return
    dst_alpha = pygame.surfarray.pixels_alpha(dst)
    dst_alpha[area.x:area.right, area.y:area.bottom] = pygame.surfarray.array_alpha(src)[
        sx:sx + area.width, sy:sy + area.height
    ]
    del dst_alpha


def compose_matrix(
    frames: Sequence[Frame],
    layout: MatrixLayout,
    surface_flags: int = pygame.SRCALPHA,
) -> pygame.Surface:
    """Render every frame into its cell of a new table surface."""
    tiled = pygame.Surface(layout.size, surface_flags)
    if surface_flags & pygame.SRCALPHA:
        tiled.fill((0, 0, 0, 0))

    for k, frame in enumerate(frames):
        pos = layout.frame_position(k, frame.width, frame.height)
        copy_surface(tiled, frame.surface, pos)

    return tiled


def export_matrix(
    frames: Sequence[Frame],
    bounds: FrameBounds,
    directory: str,
    prefix: str,
    writer: ImageWriter,
    *,
    columns: Optional[int] = None,
    image_format: str = "png",
    entity_name: Optional[str] = None,
    surface_flags: int = pygame.SRCALPHA,
) -> str:
    """
    Save frames as a single matrix imagetable.

    Cell size comes from the running maxima in bounds, and is encoded in the
    file name as <prefix>-table-<w>-<h>.

    Args:
        frames: Captured frames in capture order
        bounds: Running size bounds of the capture session
        directory: Output directory
        prefix: File name prefix, excluding the table suffix
        writer: Image writer
        columns: Frames per row; approximately square when omitted
        image_format: File extension
        entity_name: Name used in the error when there is nothing to export
        surface_flags: Flags for the table surface

    Returns:
        Path of the written image

    Raises:
        NoFramesCaptured: If frames is empty
    """
    if not frames:
        raise NoFramesCaptured(entity_name or prefix)

    directory = normalize_directory(directory)
    layout = compute_layout(len(frames), bounds.max_width, bounds.max_height, columns)
    logger.debug(
        "matrix layout: %d frames, %dx%d cells of %dx%d",
        len(frames),
        layout.columns,
        layout.rows,
        layout.cell_width,
        layout.cell_height,
    )

    tiled = compose_matrix(frames, layout, surface_flags)

    full_path = directory + matrix_filename(prefix, layout.cell_width, layout.cell_height, image_format)
    logger.info("Writing matrix imagetable to %s", full_path)
    writer.write(tiled, full_path)
    return full_path
