"""Built-in Normal-mode keymap."""

from __future__ import annotations

from vi_input.modes.state import Mode

from .models import (
    Action,
    Binding,
    Edit,
    EditKind,
    ModeChange,
    Motion,
    MotionKind,
    Pending,
)
from .registry import KeymapTable

INSERT = ModeChange(Mode.INSERT)


def _bind(
    name: str, keys: tuple[str, ...], *actions: Action, description: str = ""
) -> tuple[Binding, ...]:
    """One binding per alias key, all sharing the same actions."""

    return tuple(
        Binding(
            id=f"normal.{name}" if index == 0 else f"normal.{name}.{key}",
            sequence=(key,),
            actions=actions,
            description=description,
        )
        for index, key in enumerate(keys)
    )


def _chord(
    name: str, prefix: str, key: str, *actions: Action, description: str = ""
) -> Binding:
    return Binding(
        id=f"pending.{name}",
        sequence=(prefix, key),
        actions=actions,
        description=description,
    )


NORMAL_BINDINGS: tuple[Binding, ...] = (
    # Mode switching.
    *_bind("insert", ("i",), INSERT, description="Insert before cursor"),
    *_bind(
        "insert_line_start",
        ("I",),
        Motion(MotionKind.LINE_START),
        INSERT,
        description="Insert at line start",
    ),
    *_bind(
        "append",
        ("a",),
        Motion(MotionKind.RIGHT),
        INSERT,
        description="Append after cursor",
    ),
    *_bind(
        "append_line_end",
        ("A",),
        Motion(MotionKind.LINE_END),
        INSERT,
        description="Append at line end",
    ),
    *_bind(
        "open_below",
        ("o",),
        Motion(MotionKind.LINE_END),
        Edit(EditKind.INSERT_NEWLINE),
        INSERT,
        description="Open a line below",
    ),
    *_bind(
        "open_above",
        ("O",),
        Motion(MotionKind.LINE_START),
        Edit(EditKind.INSERT_NEWLINE),
        Motion(MotionKind.UP),
        INSERT,
        description="Open a line above",
    ),
    # Movement.
    *_bind("left", ("h", "left"), Motion(MotionKind.LEFT)),
    *_bind("right", ("l", "right"), Motion(MotionKind.RIGHT)),
    *_bind("down", ("j", "down"), Motion(MotionKind.DOWN)),
    *_bind("up", ("k", "up"), Motion(MotionKind.UP)),
    *_bind("word_forward", ("w",), Motion(MotionKind.WORD_FORWARD)),
    *_bind("word_backward", ("b",), Motion(MotionKind.WORD_BACKWARD)),
    *_bind("word_end", ("e",), Motion(MotionKind.WORD_END)),
    *_bind("line_start", ("0", "home"), Motion(MotionKind.LINE_START)),
    *_bind("line_end", ("$", "end"), Motion(MotionKind.LINE_END)),
    *_bind("document_end", ("G",), Motion(MotionKind.DOCUMENT_END)),
    *_bind("go", ("g",), Pending("g")),
    # Editing.
    *_bind("delete_char", ("x", "delete"), Edit(EditKind.DELETE_CHAR)),
    *_bind("delete", ("d",), Pending("d")),
    *_bind(
        "change_to_line_end",
        ("C",),
        Edit(EditKind.DELETE_TO_LINE_END),
        INSERT,
        description="Change to line end",
    ),
    *_bind("delete_to_line_end", ("D",), Edit(EditKind.DELETE_TO_LINE_END)),
    *_bind(
        "substitute_char",
        ("s",),
        Edit(EditKind.DELETE_CHAR),
        INSERT,
        description="Substitute character",
    ),
    *_bind(
        "substitute_line",
        ("S",),
        Edit(EditKind.DELETE_LINE),
        INSERT,
        description="Substitute line",
    ),
)

PENDING_BINDINGS: tuple[Binding, ...] = (
    _chord("delete_line", "d", "d", Edit(EditKind.DELETE_LINE)),
    _chord("delete_word", "d", "w", Edit(EditKind.DELETE_WORD)),
    _chord("delete_to_line_end", "d", "$", Edit(EditKind.DELETE_TO_LINE_END)),
    _chord("delete_to_line_start", "d", "0", Edit(EditKind.DELETE_TO_LINE_START)),
    _chord("document_start", "g", "g", Motion(MotionKind.DOCUMENT_START)),
)


def load_default_keymaps(table: KeymapTable, *, replace: bool = False) -> KeymapTable:
    """Register the built-in bindings; prefixes land before their chords."""

    table.register_all(NORMAL_BINDINGS, replace=replace)
    table.register_all(PENDING_BINDINGS, replace=replace)
    return table


def default_keymap() -> KeymapTable:
    return load_default_keymaps(KeymapTable(logger_name="vi_input.keymaps"))


__all__ = [
    "NORMAL_BINDINGS",
    "PENDING_BINDINGS",
    "default_keymap",
    "load_default_keymaps",
]
