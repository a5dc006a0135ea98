"""Per-widget modal state and the cursor shape each mode draws."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from vi_input.buffer.handle import BufferHandle, CursorShape


class Mode(str, Enum):
    INSERT = "insert"
    NORMAL = "normal"


INDICATORS = {
    Mode.INSERT: "INSERT",
    Mode.NORMAL: "NORMAL",
}


@dataclass(slots=True)
class ModeState:
    """Enabled flag, current mode and any outstanding command prefix.

    ``pending`` is only ever set while ``mode`` is Normal. While the engine
    is disabled ``mode`` and ``pending`` are ignored and the widget behaves
    as a plain text input.
    """

    enabled: bool = False
    mode: Mode = Mode.INSERT
    pending: Optional[str] = None
    base_cursor_shape: CursorShape = CursorShape.BAR

    def is_enabled(self) -> bool:
        return self.enabled

    def is_normal(self) -> bool:
        return self.enabled and self.mode is Mode.NORMAL

    def indicator(self) -> str:
        """Short status-line label: ``""``, a mode name or the pending prefix."""

        if not self.enabled:
            return ""
        if self.mode is Mode.NORMAL and self.pending:
            return self.pending
        return INDICATORS[self.mode]


def cursor_shape_for(state: ModeState) -> CursorShape:
    if state.mode is Mode.NORMAL:
        return CursorShape.BLOCK
    return state.base_cursor_shape


def apply_cursor_shape(state: ModeState, buffer: BufferHandle) -> CursorShape:
    shape = cursor_shape_for(state)
    buffer.set_cursor_shape(shape)
    return shape


__all__ = [
    "Mode",
    "ModeState",
    "INDICATORS",
    "cursor_shape_for",
    "apply_cursor_shape",
]
