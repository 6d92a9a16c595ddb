"""
Capture and export of rendered frames.

Provides:
- Roto, the capture engine bound to one drawable entity
- Numbered sequence and matrix imagetable export
- Image writers backed by pygame or Pillow
"""

from .frame_store import Frame, FrameBounds, FrameStore
from .interceptor import RenderInterceptor
from .matrix import MatrixLayout, compute_layout, export_matrix
from .roto import Roto
from .sequence import export_sequence
from .state import CapturePhase, CaptureState
from .writer import PillowImageWriter, PygameImageWriter, make_writer

__all__ = [
    'Frame',
    'FrameBounds',
    'FrameStore',
    'RenderInterceptor',
    'MatrixLayout',
    'compute_layout',
    'export_matrix',
    'Roto',
    'export_sequence',
    'CapturePhase',
    'CaptureState',
    'PillowImageWriter',
    'PygameImageWriter',
    'make_writer',
]
