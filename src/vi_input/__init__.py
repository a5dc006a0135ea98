"""Modal (Insert/Normal) input engine for text buffer widgets."""

from .buffer import BufferHandle, CursorShape, MemoryBuffer
from .dispatcher import DispatchResult, KeyDispatcher
from .modes import Mode, ModeBus, ModeState
from .runtime.config import ConfigError, ViConfig

__all__ = [
    "BufferHandle",
    "ConfigError",
    "CursorShape",
    "DispatchResult",
    "KeyDispatcher",
    "MemoryBuffer",
    "Mode",
    "ModeBus",
    "ModeState",
    "ViConfig",
]

__version__ = "0.1.0"
