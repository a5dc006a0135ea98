from __future__ import annotations

import pytest

from vi_input.actions import EditExecutor, MotionExecutor, delete_line
from vi_input.buffer import CursorShape, MemoryBuffer
from vi_input.keymaps import EditKind, MotionKind


class DriftingBuffer(MemoryBuffer):
    """Reports a cursor row past the end of the text."""

    def current_line(self) -> int:
        return 10


def make_buffer(*lines: str, cursor: tuple[int, int] = (0, 0)) -> MemoryBuffer:
    buffer = MemoryBuffer.from_lines(lines)
    buffer.move_cursor(*cursor)
    return buffer


def test_memory_buffer_motions_clamp_at_document_edges() -> None:
    buffer = make_buffer("ab", "cd")

    buffer.cursor_left()
    buffer.cursor_up()
    assert buffer.cursor == (0, 0)

    buffer.cursor_to_document_end()
    buffer.cursor_right()
    buffer.cursor_down()
    assert buffer.cursor == (1, 2)


def test_memory_buffer_horizontal_motions_wrap_lines() -> None:
    buffer = make_buffer("ab", "cd", cursor=(1, 0))

    buffer.cursor_left()
    assert buffer.cursor == (0, 2)

    buffer.cursor_right()
    assert buffer.cursor == (1, 0)


def test_memory_buffer_vertical_motion_clamps_column() -> None:
    buffer = make_buffer("long line", "x", cursor=(0, 7))

    buffer.cursor_down()

    assert buffer.cursor == (1, 1)


def test_memory_buffer_word_motions_cross_lines() -> None:
    buffer = make_buffer("foo", "  bar baz")

    buffer.word_forward()
    assert buffer.cursor == (1, 2)

    buffer.word_backward()
    assert buffer.cursor == (0, 0)


def test_memory_buffer_insert_newline_splits_line() -> None:
    buffer = make_buffer("abcd", cursor=(0, 2))

    buffer.insert_rune("\n")
    buffer.insert_rune("x")

    assert buffer.lines == ("ab", "xcd")
    assert buffer.cursor == (1, 1)


def test_memory_buffer_delete_forward_char_joins_lines_at_eol() -> None:
    buffer = make_buffer("ab", "cd", cursor=(0, 2))

    buffer.delete_forward_char()

    assert buffer.lines == ("abcd",)
    assert buffer.cursor == (0, 2)


def test_memory_buffer_delete_at_document_end_is_noop() -> None:
    buffer = make_buffer("ab", cursor=(0, 2))

    buffer.delete_forward_char()
    buffer.delete_forward_word()

    assert buffer.lines == ("ab",)


def test_memory_buffer_set_value_replaces_text() -> None:
    buffer = make_buffer("old")

    buffer.set_value("new\ntext")

    assert buffer.value() == "new\ntext"
    assert buffer.current_line() == 1


def test_delete_line_out_of_range_is_noop() -> None:
    buffer = DriftingBuffer("a\nb")

    assert delete_line(buffer) is False
    assert buffer.lines == ("a", "b")


def test_delete_line_first_row() -> None:
    buffer = make_buffer("a", "b", "c", cursor=(0, 1))

    assert delete_line(buffer) is True
    assert buffer.lines == ("b", "c")
    assert buffer.cursor == (0, 0)


@pytest.mark.parametrize(
    ("kind", "lines", "cursor"),
    [
        (EditKind.DELETE_CHAR, ("bc d",), (0, 0)),
        (EditKind.DELETE_WORD, ("d",), (0, 0)),
        (EditKind.DELETE_TO_LINE_END, ("",), (0, 0)),
        (EditKind.DELETE_TO_LINE_START, ("abc d",), (0, 0)),
        (EditKind.INSERT_NEWLINE, ("", "abc d"), (1, 0)),
    ],
)
def test_edit_executor(
    kind: EditKind, lines: tuple[str, ...], cursor: tuple[int, int]
) -> None:
    buffer = make_buffer("abc d")

    EditExecutor(buffer).run(kind)

    assert buffer.lines == lines
    assert buffer.cursor == cursor


def test_motion_executor_covers_every_kind() -> None:
    buffer = make_buffer("one two", "three", cursor=(1, 2))
    executor = MotionExecutor(buffer)

    for kind in MotionKind:
        executor.run(kind)

    assert buffer.cursor == (1, 5)


def test_cursor_shape_round_trip() -> None:
    buffer = MemoryBuffer(cursor_shape=CursorShape.UNDERLINE)
    assert buffer.get_cursor_shape() is CursorShape.UNDERLINE

    buffer.set_cursor_shape(CursorShape.BLOCK)

    assert buffer.get_cursor_shape() is CursorShape.BLOCK
