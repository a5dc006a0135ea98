"""Capability boundary between the modal engine and the host text buffer."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class CursorShape(str, Enum):
    """Cursor shapes a host widget can draw."""

    BLOCK = "block"
    BAR = "bar"
    UNDERLINE = "underline"


class BufferHandle(Protocol):
    """Text storage and cursor primitives the engine orchestrates.

    The engine never stores text itself; every motion and edit goes through
    these calls. Single-step motions clamp at the document bounds, and
    ``set_value`` leaves the cursor position unspecified, so callers must
    reposition explicitly afterwards.
    """

    def cursor_left(self) -> None: ...

    def cursor_right(self) -> None: ...

    def cursor_up(self) -> None: ...

    def cursor_down(self) -> None: ...

    def word_forward(self) -> None: ...

    def word_backward(self) -> None: ...

    def cursor_to_line_start(self) -> None: ...

    def cursor_to_line_end(self) -> None: ...

    def cursor_to_document_start(self) -> None: ...

    def cursor_to_document_end(self) -> None: ...

    def insert_rune(self, char: str) -> None: ...

    def delete_forward_char(self) -> None: ...

    def delete_forward_word(self) -> None: ...

    def delete_to_line_end(self) -> None: ...

    def delete_to_line_start(self) -> None: ...

    def value(self) -> str: ...

    def set_value(self, text: str) -> None: ...

    def current_line(self) -> int: ...

    def get_cursor_shape(self) -> CursorShape: ...

    def set_cursor_shape(self, shape: CursorShape) -> None: ...


__all__ = ["BufferHandle", "CursorShape"]
