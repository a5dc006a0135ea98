"""Executors turning motion and edit actions into buffer calls."""

from .edits import EDITS, EditExecutor, delete_line
from .motions import MOTIONS, MotionExecutor

__all__ = [
    "EDITS",
    "EditExecutor",
    "delete_line",
    "MOTIONS",
    "MotionExecutor",
]
