"""
Base export interfaces and protocols.

Defines the ImageWriter protocol that every image writer must follow.
"""

from typing import Protocol

import pygame


class ImageWriter(Protocol):
    """
    Protocol for image writers.

    Exporters hand each finished surface to a writer; the writer owns
    directory creation and file encoding.
    """

    def write(self, surface: pygame.Surface, path: str) -> None:
        """
        Write a surface to an image file.

        Args:
            surface: Image to encode
            path: Destination file path; the extension selects the format

        Raises:
            Exception: If the file cannot be written
        """
        ...
