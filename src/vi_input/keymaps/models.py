"""Action variants and the bindings that map keys onto them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from vi_input.modes.state import Mode


class MotionKind(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    WORD_FORWARD = "word_forward"
    WORD_BACKWARD = "word_backward"
    WORD_END = "word_end"
    LINE_START = "line_start"
    LINE_END = "line_end"
    DOCUMENT_START = "document_start"
    DOCUMENT_END = "document_end"


class EditKind(str, Enum):
    DELETE_CHAR = "delete_char"
    DELETE_WORD = "delete_word"
    DELETE_TO_LINE_END = "delete_to_line_end"
    DELETE_TO_LINE_START = "delete_to_line_start"
    DELETE_LINE = "delete_line"
    INSERT_NEWLINE = "insert_newline"


@dataclass(frozen=True, slots=True)
class Motion:
    kind: MotionKind


@dataclass(frozen=True, slots=True)
class Edit:
    kind: EditKind


@dataclass(frozen=True, slots=True)
class ModeChange:
    to: Mode


@dataclass(frozen=True, slots=True)
class Pending:
    """Hold ``prefix`` until the next key disambiguates it."""

    prefix: str

    def __post_init__(self) -> None:
        if len(self.prefix) != 1:
            raise ValueError("pending prefix must be a single character")


@dataclass(frozen=True, slots=True)
class Cancel:
    """Discard a pending prefix without touching the buffer."""


Action = Union[Motion, Edit, ModeChange, Pending, Cancel]


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a one- or two-key sequence with an ordered list of actions.

    Two-key sequences are only reachable after their first key has put the
    dispatcher into the pending state, so nesting never goes deeper than one
    prefix.
    """

    id: str
    sequence: tuple[str, ...]
    actions: tuple[Action, ...]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not 1 <= len(self.sequence) <= 2:
            raise ValueError(
                f"Binding '{self.id}' must have one or two keys, got {self.sequence!r}"
            )
        if any(not key for key in self.sequence):
            raise ValueError(f"Binding '{self.id}' contains an empty key")
        if not self.actions:
            raise ValueError(f"Binding '{self.id}' has no actions")

    @property
    def prefix(self) -> str | None:
        return self.sequence[0] if len(self.sequence) == 2 else None

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence)


__all__ = [
    "Action",
    "Binding",
    "Cancel",
    "Edit",
    "EditKind",
    "ModeChange",
    "Motion",
    "MotionKind",
    "Pending",
]
