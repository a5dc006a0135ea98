"""Mode state, cursor-shape policy and the mode-change bus."""

from .bus import ModeBus
from .state import INDICATORS, Mode, ModeState, apply_cursor_shape, cursor_shape_for

__all__ = [
    "INDICATORS",
    "Mode",
    "ModeBus",
    "ModeState",
    "apply_cursor_shape",
    "cursor_shape_for",
]
