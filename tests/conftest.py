"""Shared fixtures for rotoscope tests."""

from __future__ import annotations

import logging
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from typing import List, Sequence, Tuple

import pygame
import pytest

from rotoscope import Roto, RotoConfig


class ScriptedSprite:
    """Test entity whose size follows a script, one entry per draw call.

    Each draw fills the surface with a solid colour derived from the draw
    count so captured frames can be told apart by pixel.
    """

    def __init__(self, size: Tuple[int, int] = (20, 20), script: Sequence[Tuple[int, int]] = ()):
        self.size = size
        self.script = list(script)
        self.draw_calls = 0

    def get_size(self) -> Tuple[int, int]:
        return self.size

    def draw(self, surface: pygame.Surface) -> None:
        self.draw_calls += 1
        surface.fill(frame_colour(self.draw_calls))

    def advance(self) -> None:
        if self.script:
            self.size = self.script.pop(0)


def frame_colour(n: int) -> Tuple[int, int, int, int]:
    return ((n * 40) % 256, (n * 90) % 256, 200, 255)


class RecordingWriter:
    """Image writer that keeps surfaces in memory."""

    def __init__(self):
        self.writes: List[Tuple[str, pygame.Surface]] = []

    def write(self, surface: pygame.Surface, path: str) -> None:
        self.writes.append((path, surface.copy()))

    @property
    def paths(self) -> List[str]:
        return [p for p, _ in self.writes]


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def sprite() -> ScriptedSprite:
    return ScriptedSprite()


@pytest.fixture
def roto(sprite, writer) -> Roto:
    return Roto(sprite, RotoConfig(environment="test"), writer=writer)


def render_frames(roto: Roto, sprite: ScriptedSprite, n: int, target: pygame.Surface = None) -> None:
    """Simulate n render triggers, advancing the sprite's size script after each."""
    if target is None:
        target = pygame.Surface((64, 64), pygame.SRCALPHA)
    for _ in range(n):
        roto.renderable.draw(target)
        sprite.advance()


@pytest.fixture(autouse=True)
def _restore_package_log_level():
    # setup_logging() sets the package logger level; keep it from leaking across tests
    pkg = logging.getLogger("rotoscope")
    saved = pkg.level
    yield
    pkg.setLevel(saved)
