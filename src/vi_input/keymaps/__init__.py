"""Normal-mode keymap: action variants, binding table and resolver."""

from .models import (
    Action,
    Binding,
    Cancel,
    Edit,
    EditKind,
    ModeChange,
    Motion,
    MotionKind,
    Pending,
)
from .registry import KeymapConflictError, KeymapTable
from .resolver import PendingCommandResolver, ResolutionResult
from .defaults import (
    NORMAL_BINDINGS,
    PENDING_BINDINGS,
    default_keymap,
    load_default_keymaps,
)

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
    "KeymapConflictError",
    "KeymapTable",
    "PendingCommandResolver",
    "ResolutionResult",
    "NORMAL_BINDINGS",
    "PENDING_BINDINGS",
    "default_keymap",
    "load_default_keymaps",
]
