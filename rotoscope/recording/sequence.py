"""
Numbered image sequence export.

Writes each captured frame as <prefix>-table-<n>.png, zero padding n to the
digit count of the frame total so file names sort in capture order.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..errors import NoFramesCaptured
from .base import ImageWriter
from .frame_store import Frame
from .utils import normalize_directory, pad_width, sequence_filename

logger = logging.getLogger(__name__)


def export_sequence(
    frames: Sequence[Frame],
    directory: str,
    prefix: str,
    writer: ImageWriter,
    *,
    image_format: str = "png",
    entity_name: Optional[str] = None,
) -> List[str]:
    """
    Save frames as a numbered sequence of images.

    Args:
        frames: Captured frames in capture order
        directory: Output directory
        prefix: File name prefix, excluding the numbered table suffix
        writer: Image writer used for every file
        image_format: File extension
        entity_name: Name used in the error when there is nothing to export

    Returns:
        Written paths, in capture order

    Raises:
        NoFramesCaptured: If frames is empty
    """
    if not frames:
        raise NoFramesCaptured(entity_name or prefix)

    directory = normalize_directory(directory)
    width = pad_width(len(frames))

    logger.info("Writing imagetable sequence to %s%s-table-N.%s", directory, prefix, image_format)

    paths: List[str] = []
    for i, frame in enumerate(frames, start=1):
        full_path = directory + sequence_filename(prefix, i, width, image_format)
        writer.write(frame.surface, full_path)
        paths.append(full_path)
    return paths
