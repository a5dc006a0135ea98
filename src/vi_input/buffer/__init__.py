"""Buffer capability protocol and a headless reference implementation."""

from .handle import BufferHandle, CursorShape
from .memory import Cursor, MemoryBuffer

__all__ = [
    "BufferHandle",
    "CursorShape",
    "Cursor",
    "MemoryBuffer",
]
