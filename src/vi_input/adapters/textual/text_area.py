"""BufferHandle implementation and modal widget over Textual's ``TextArea``."""

from __future__ import annotations

from typing import Optional

from textual import events
from textual.message import Message
from textual.widgets import TextArea

from vi_input.buffer.handle import CursorShape
from vi_input.dispatcher import KeyDispatcher
from vi_input.runtime.config import ViConfig

from .controller import ViController, ViUIHooks, normalize_key

CURSOR_CLASSES = {shape: f"-cursor-{shape.value}" for shape in CursorShape}


class TextAreaBuffer:
    """Drives a ``TextArea`` through the BufferHandle primitives.

    The widget has no native cursor shapes, so the active shape is exposed as
    one of the ``-cursor-*`` CSS classes and styled by ``ViTextArea``.
    """

    def __init__(
        self, text_area: TextArea, *, cursor_shape: CursorShape = CursorShape.BAR
    ) -> None:
        if not isinstance(text_area, TextArea):
            raise TypeError(
                f"TextAreaBuffer wraps a TextArea, got {type(text_area).__name__}"
            )
        self._text_area = text_area
        self._shape = cursor_shape

    @property
    def text_area(self) -> TextArea:
        return self._text_area

    def cursor_left(self) -> None:
        self._text_area.action_cursor_left()

    def cursor_right(self) -> None:
        self._text_area.action_cursor_right()

    def cursor_up(self) -> None:
        self._text_area.action_cursor_up()

    def cursor_down(self) -> None:
        self._text_area.action_cursor_down()

    def word_forward(self) -> None:
        self._text_area.action_cursor_word_right()

    def word_backward(self) -> None:
        self._text_area.action_cursor_word_left()

    def cursor_to_line_start(self) -> None:
        row, _ = self._text_area.cursor_location
        self._text_area.move_cursor((row, 0))

    def cursor_to_line_end(self) -> None:
        row, _ = self._text_area.cursor_location
        line = self._text_area.document.get_line(row)
        self._text_area.move_cursor((row, len(line)))

    def cursor_to_document_start(self) -> None:
        self._text_area.move_cursor((0, 0))

    def cursor_to_document_end(self) -> None:
        self._text_area.move_cursor(self._text_area.document.end)

    def insert_rune(self, char: str) -> None:
        self._text_area.insert(char, maintain_selection_offset=False)

    def delete_forward_char(self) -> None:
        self._text_area.action_delete_right()

    def delete_forward_word(self) -> None:
        self._text_area.action_delete_word_right()

    def delete_to_line_end(self) -> None:
        self._text_area.action_delete_to_end_of_line()

    def delete_to_line_start(self) -> None:
        self._text_area.action_delete_to_start_of_line()

    def value(self) -> str:
        return self._text_area.text

    def set_value(self, text: str) -> None:
        self._text_area.load_text(text)

    def current_line(self) -> int:
        return self._text_area.cursor_location[0]

    def get_cursor_shape(self) -> CursorShape:
        return self._shape

    def set_cursor_shape(self, shape: CursorShape) -> None:
        self._shape = shape
        self._text_area.remove_class(*CURSOR_CLASSES.values())
        self._text_area.add_class(CURSOR_CLASSES[shape])


class ViTextArea(TextArea):
    """``TextArea`` with a modal editing engine in front of its key handling."""

    DEFAULT_CSS = """
    ViTextArea.-cursor-block .text-area--cursor {
        text-style: reverse;
    }
    ViTextArea.-cursor-bar .text-area--cursor {
        text-style: bold;
    }
    ViTextArea.-cursor-underline .text-area--cursor {
        text-style: underline;
    }
    """

    class ModeChanged(Message):
        """Posted whenever the mode indicator changes."""

        def __init__(self, text_area: "ViTextArea", indicator: str) -> None:
            super().__init__()
            self.text_area = text_area
            self.indicator = indicator

        @property
        def control(self) -> "ViTextArea":
            return self.text_area

    def __init__(
        self,
        text: str = "",
        *,
        config: Optional[ViConfig] = None,
        **kwargs,
    ) -> None:
        super().__init__(text, **kwargs)
        self.vi_config = config or ViConfig.from_env()
        self.vi_buffer = TextAreaBuffer(self, cursor_shape=self.vi_config.cursor_shape)
        self.vi_buffer.set_cursor_shape(self.vi_config.cursor_shape)
        self.dispatcher = KeyDispatcher.from_config(self.vi_buffer, self.vi_config)
        self.controller = ViController(
            self.dispatcher,
            ViUIHooks(update_status=self._update_status),
            config=self.vi_config,
        )
        self.border_subtitle = self.dispatcher.indicator()

    def on_key(self, event: events.Key) -> None:
        key = normalize_key(event)
        if self.controller.handle_key(key):
            event.prevent_default()
            event.stop()

    def on_unmount(self) -> None:
        self.controller.close()

    def _update_status(self, indicator: str) -> None:
        self.border_subtitle = indicator
        self.post_message(self.ModeChanged(self, indicator))


__all__ = ["CURSOR_CLASSES", "TextAreaBuffer", "ViTextArea"]
