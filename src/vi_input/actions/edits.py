"""Buffer mutations, including the composite delete-line edit."""

from __future__ import annotations

from typing import Callable, Dict

from vi_input.buffer.handle import BufferHandle
from vi_input.keymaps.models import EditKind
from vi_input.runtime import telemetry


def delete_line(buffer: BufferHandle) -> bool:
    """Remove the cursor's line and park the cursor at column 0.

    The cursor lands on the row the deleted line occupied, or on the new last
    line when the deleted line was the last one. Returns ``False`` without
    touching the buffer when the cursor row is outside the text.
    """

    with telemetry.span("edit::delete_line", component="edits") as handle:
        lines = buffer.value().split("\n")
        row = buffer.current_line()
        handle.add_metadata("row", row)
        if row < 0 or row >= len(lines):
            handle.add_metadata("status", "out_of_range")
            return False

        del lines[row]
        buffer.set_value("\n".join(lines))

        # set_value leaves the cursor anywhere; walk down from the top.
        buffer.cursor_to_document_start()
        for _ in range(min(row, len(lines) - 1)):
            buffer.cursor_down()
        buffer.cursor_to_line_start()
        handle.add_metadata("status", "deleted")
        return True


EDITS: Dict[EditKind, Callable[[BufferHandle], object]] = {
    EditKind.DELETE_CHAR: lambda buffer: buffer.delete_forward_char(),
    EditKind.DELETE_WORD: lambda buffer: buffer.delete_forward_word(),
    EditKind.DELETE_TO_LINE_END: lambda buffer: buffer.delete_to_line_end(),
    EditKind.DELETE_TO_LINE_START: lambda buffer: buffer.delete_to_line_start(),
    EditKind.DELETE_LINE: delete_line,
    EditKind.INSERT_NEWLINE: lambda buffer: buffer.insert_rune("\n"),
}


class EditExecutor:
    def __init__(self, buffer: BufferHandle) -> None:
        self.buffer = buffer

    def run(self, kind: EditKind) -> None:
        EDITS[kind](self.buffer)


__all__ = ["EDITS", "EditExecutor", "delete_line"]
