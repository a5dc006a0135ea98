"""Textual integration: TextArea-backed buffer, controller and demo app."""

from .controller import ViController, ViUIHooks, normalize_key
from .text_area import CURSOR_CLASSES, TextAreaBuffer, ViTextArea

__all__ = [
    "CURSOR_CLASSES",
    "TextAreaBuffer",
    "ViController",
    "ViTextArea",
    "ViUIHooks",
    "normalize_key",
]
