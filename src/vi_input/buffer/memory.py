"""In-memory ``BufferHandle`` built on a simple list-of-lines model."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .handle import CursorShape

Cursor = Tuple[int, int]  # (row, column)


class MemoryBuffer:
    """Headless text buffer with a single cursor.

    Words are runs of non-whitespace characters. Horizontal motions wrap
    across line boundaries the way most text widgets do; every motion stops
    at the document edges.
    """

    def __init__(
        self,
        text: str = "",
        *,
        cursor_shape: CursorShape = CursorShape.BAR,
    ) -> None:
        self._lines: List[str] = text.split("\n")
        self._row = 0
        self._col = 0
        self._cursor_shape = cursor_shape

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        *,
        cursor_shape: CursorShape = CursorShape.BAR,
    ) -> "MemoryBuffer":
        return cls("\n".join(lines), cursor_shape=cursor_shape)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def cursor(self) -> Cursor:
        return (self._row, self._col)

    def move_cursor(self, row: int, col: int) -> None:
        row = max(0, min(row, len(self._lines) - 1))
        self._row = row
        self._col = max(0, min(col, len(self._lines[row])))

    # Motions -------------------------------------------------------------

    def cursor_left(self) -> None:
        if self._col > 0:
            self._col -= 1
        elif self._row > 0:
            self._row -= 1
            self._col = len(self._lines[self._row])

    def cursor_right(self) -> None:
        if self._col < len(self._lines[self._row]):
            self._col += 1
        elif self._row < len(self._lines) - 1:
            self._row += 1
            self._col = 0

    def cursor_up(self) -> None:
        if self._row > 0:
            self.move_cursor(self._row - 1, self._col)

    def cursor_down(self) -> None:
        if self._row < len(self._lines) - 1:
            self.move_cursor(self._row + 1, self._col)

    def word_forward(self) -> None:
        self._set_offset(self._next_word_offset())

    def word_backward(self) -> None:
        text = self.value()
        offset = self._offset()
        while offset > 0 and text[offset - 1].isspace():
            offset -= 1
        while offset > 0 and not text[offset - 1].isspace():
            offset -= 1
        self._set_offset(offset)

    def cursor_to_line_start(self) -> None:
        self._col = 0

    def cursor_to_line_end(self) -> None:
        self._col = len(self._lines[self._row])

    def cursor_to_document_start(self) -> None:
        self._row, self._col = 0, 0

    def cursor_to_document_end(self) -> None:
        self._row = len(self._lines) - 1
        self._col = len(self._lines[self._row])

    # Edits ---------------------------------------------------------------

    def insert_rune(self, char: str) -> None:
        line = self._lines[self._row]
        head, tail = line[: self._col], line[self._col :]
        if char == "\n":
            self._lines[self._row : self._row + 1] = [head, tail]
            self._row += 1
            self._col = 0
            return
        self._lines[self._row] = head + char + tail
        self._col += len(char)

    def delete_forward_char(self) -> None:
        offset = self._offset()
        self._delete_range(offset, offset + 1)

    def delete_forward_word(self) -> None:
        self._delete_range(self._offset(), self._next_word_offset())

    def delete_to_line_end(self) -> None:
        line = self._lines[self._row]
        self._lines[self._row] = line[: self._col]

    def delete_to_line_start(self) -> None:
        line = self._lines[self._row]
        self._lines[self._row] = line[self._col :]
        self._col = 0

    # Content -------------------------------------------------------------

    def value(self) -> str:
        return "\n".join(self._lines)

    def set_value(self, text: str) -> None:
        self._lines = text.split("\n")
        self.cursor_to_document_end()

    def current_line(self) -> int:
        return self._row

    def get_cursor_shape(self) -> CursorShape:
        return self._cursor_shape

    def set_cursor_shape(self, shape: CursorShape) -> None:
        self._cursor_shape = shape

    # Offset helpers ------------------------------------------------------

    def _offset(self) -> int:
        offset = 0
        for i in range(self._row):
            offset += len(self._lines[i]) + 1  # newline
        return offset + self._col

    def _set_offset(self, offset: int) -> None:
        running = 0
        for row, line in enumerate(self._lines):
            if offset <= running + len(line):
                self._row, self._col = row, offset - running
                return
            running += len(line) + 1
        self.cursor_to_document_end()

    def _next_word_offset(self) -> int:
        text = self.value()
        offset = self._offset()
        while offset < len(text) and not text[offset].isspace():
            offset += 1
        while offset < len(text) and text[offset].isspace():
            offset += 1
        return offset

    def _delete_range(self, start: int, end: int) -> None:
        text = self.value()
        end = min(end, len(text))
        if start >= end:
            return
        self._lines = (text[:start] + text[end:]).split("\n")
        self._set_offset(start)

    def __repr__(self) -> str:
        return f"MemoryBuffer(lines={self._lines!r}, cursor={self.cursor!r})"


__all__ = ["MemoryBuffer", "Cursor"]
