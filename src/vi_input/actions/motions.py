"""Cursor motions expressed as BufferHandle calls."""

from __future__ import annotations

from typing import Callable, Dict

from vi_input.buffer.handle import BufferHandle
from vi_input.keymaps.models import MotionKind


def _word_end(buffer: BufferHandle) -> None:
    # Same landing spot as word_forward; "e" has always behaved like "w" here.
    buffer.word_forward()


MOTIONS: Dict[MotionKind, Callable[[BufferHandle], None]] = {
    MotionKind.LEFT: lambda buffer: buffer.cursor_left(),
    MotionKind.RIGHT: lambda buffer: buffer.cursor_right(),
    MotionKind.UP: lambda buffer: buffer.cursor_up(),
    MotionKind.DOWN: lambda buffer: buffer.cursor_down(),
    MotionKind.WORD_FORWARD: lambda buffer: buffer.word_forward(),
    MotionKind.WORD_BACKWARD: lambda buffer: buffer.word_backward(),
    MotionKind.WORD_END: _word_end,
    MotionKind.LINE_START: lambda buffer: buffer.cursor_to_line_start(),
    MotionKind.LINE_END: lambda buffer: buffer.cursor_to_line_end(),
    MotionKind.DOCUMENT_START: lambda buffer: buffer.cursor_to_document_start(),
    MotionKind.DOCUMENT_END: lambda buffer: buffer.cursor_to_document_end(),
}


class MotionExecutor:
    def __init__(self, buffer: BufferHandle) -> None:
        self.buffer = buffer

    def run(self, kind: MotionKind) -> None:
        MOTIONS[kind](self.buffer)


__all__ = ["MOTIONS", "MotionExecutor"]
