"""Key dispatcher: the modal engine's single per-keypress entry point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from vi_input.actions import EditExecutor, MotionExecutor
from vi_input.buffer.handle import BufferHandle, CursorShape
from vi_input.keymaps import (
    Action,
    Cancel,
    Edit,
    KeymapTable,
    ModeChange,
    Motion,
    Pending,
    PendingCommandResolver,
    default_keymap,
)
from vi_input.modes import Mode, ModeBus, ModeState, apply_cursor_shape
from vi_input.runtime import telemetry

if TYPE_CHECKING:
    from vi_input.runtime.config import ViConfig

LOGGER_NAME = "vi_input.dispatcher"


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Returned from ``KeyDispatcher.handle_key``.

    ``consumed=False`` tells the host to fall back to its own handling of the
    key (typically literal insertion).
    """

    consumed: bool
    status: str = "ok"
    mode: Mode = Mode.INSERT

    def __bool__(self) -> bool:
        return self.consumed


class KeyDispatcher:
    """Owns one ``ModeState`` and drives one buffer, one key at a time.

    Not thread-safe: it must only be fed from the host's input loop.
    """

    def __init__(
        self,
        buffer: BufferHandle,
        *,
        state: Optional[ModeState] = None,
        keymap: Optional[KeymapTable] = None,
        bus: Optional[ModeBus] = None,
        start_mode: Mode = Mode.INSERT,
    ) -> None:
        self.buffer = buffer
        self.state = state or ModeState(base_cursor_shape=buffer.get_cursor_shape())
        self.bus = bus or ModeBus()
        self.start_mode = start_mode
        self.resolver = PendingCommandResolver(
            keymap or default_keymap(), logger_name="vi_input.keymaps"
        )
        self.motions = MotionExecutor(buffer)
        self.edits = EditExecutor(buffer)

    @classmethod
    def from_config(
        cls,
        buffer: BufferHandle,
        config: "ViConfig",
        *,
        keymap: Optional[KeymapTable] = None,
        bus: Optional[ModeBus] = None,
    ) -> "KeyDispatcher":
        dispatcher = cls(
            buffer,
            state=ModeState(base_cursor_shape=config.cursor_shape),
            keymap=keymap,
            bus=bus,
            start_mode=config.start_mode,
        )
        if config.enabled:
            dispatcher.enable()
        return dispatcher

    # Queries -------------------------------------------------------------

    def is_enabled(self) -> bool:
        return self.state.is_enabled()

    def is_normal(self) -> bool:
        return self.state.is_normal()

    def indicator(self) -> str:
        return self.state.indicator()

    def should_intercept(self) -> bool:
        """Whether the host should offer keys here before its own bindings."""

        return self.state.is_normal()

    # Entry points --------------------------------------------------------

    def handle_key(self, key: str) -> DispatchResult:
        if not self.state.is_normal():
            return self._result(False, "passthrough")

        with telemetry.span(
            "dispatch::normal",
            logger_name=LOGGER_NAME,
            component=True,
            metadata={"key": key, "pending": self.state.pending or ""},
        ) as handle:
            pending = self.state.pending
            result = self.resolver.resolve(key, pending=pending)
            handle.add_metadata("status", result.status)
            if result.status == "miss":
                return self._result(False, "unbound")

            if pending:
                self.state.pending = None
            self._apply(result.actions)
            if pending and self.state.mode is Mode.NORMAL:
                self._announce()
            return self._result(True, result.status)

    def enter_normal(self) -> None:
        """Switch to Normal mode, dropping any pending prefix.

        The cursor is left where it is.
        """

        self.state.mode = Mode.NORMAL
        self.state.pending = None
        self._mode_changed()

    def enter_insert(self) -> None:
        self.state.mode = Mode.INSERT
        self.state.pending = None
        self._mode_changed()

    def enable(self) -> None:
        self.state.enabled = True
        telemetry.record_event(
            "engine.enable", data={"mode": self.start_mode}, logger_name=LOGGER_NAME
        )
        if self.start_mode is Mode.NORMAL:
            self.enter_normal()
        else:
            self.enter_insert()

    def disable(self) -> None:
        self.state.enabled = False
        self.state.mode = Mode.INSERT
        self.state.pending = None
        telemetry.record_event("engine.disable", logger_name=LOGGER_NAME)
        self._mode_changed()

    def toggle(self) -> bool:
        if self.state.enabled:
            self.disable()
        else:
            self.enable()
        return self.state.enabled

    # Internals -----------------------------------------------------------

    def _apply(self, actions: Iterable[Action]) -> None:
        for action in actions:
            if isinstance(action, Motion):
                self.motions.run(action.kind)
            elif isinstance(action, Edit):
                self.edits.run(action.kind)
            elif isinstance(action, ModeChange):
                if action.to is Mode.NORMAL:
                    self.enter_normal()
                else:
                    self.enter_insert()
            elif isinstance(action, Pending):
                self.state.pending = action.prefix
                telemetry.record_event(
                    "pending.start",
                    data={"prefix": action.prefix},
                    logger_name=LOGGER_NAME,
                )
                self._announce()
            elif isinstance(action, Cancel):
                telemetry.record_event("pending.cancel", logger_name=LOGGER_NAME)
            else:  # pragma: no cover - exhaustive over Action
                raise TypeError(f"Unknown action {action!r}")

    def _mode_changed(self) -> None:
        shape: CursorShape = apply_cursor_shape(self.state, self.buffer)
        telemetry.record_event(
            "mode.switch",
            data={
                "mode": self.state.mode,
                "enabled": self.state.enabled,
                "cursor_shape": shape,
            },
            logger_name=LOGGER_NAME,
        )
        self._announce()

    def _announce(self) -> None:
        self.bus.emit("mode.change", self.state.indicator())

    def _result(self, consumed: bool, status: str) -> DispatchResult:
        return DispatchResult(consumed=consumed, status=status, mode=self.state.mode)


__all__ = ["DispatchResult", "KeyDispatcher"]
