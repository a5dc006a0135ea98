"""Host-side glue between Textual key events and the key dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textual import events

from vi_input.dispatcher import KeyDispatcher
from vi_input.runtime.config import ViConfig


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class ViUIHooks:
    """Callbacks the controller uses to reach the hosting widgets."""

    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_key(event: events.Key) -> str:
    """Map a Textual key event onto the dispatcher's key vocabulary.

    Printable characters are used as-is (``"$"``, ``"G"``); everything else
    keeps Textual's key name (``"escape"``, ``"left"``, ``"ctrl+backslash"``).
    """

    character = event.character
    if event.key != "space" and character and len(character) == 1:
        if character.isprintable():
            return character
    return event.key


class ViController:
    """Routes keys to the dispatcher, handling the host-owned mode keys first.

    Leaving Insert mode and toggling modal editing are bound by the host
    (``ViConfig.normal_key`` and ``ViConfig.toggle_key``); every other key goes
    straight to ``KeyDispatcher.handle_key``.
    """

    def __init__(
        self,
        dispatcher: KeyDispatcher,
        hooks: Optional[ViUIHooks] = None,
        *,
        config: Optional[ViConfig] = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks or ViUIHooks()
        self.config = config or ViConfig()
        self.dispatcher.bus.subscribe("mode.change", self._on_mode_change)

    def handle_key(self, key: str) -> bool:
        """Return ``True`` when the key was consumed by modal editing."""

        if self.config.toggle_key and key == self.config.toggle_key:
            enabled = self.dispatcher.toggle()
            self._log("toggle ->", key=key, enabled=enabled)
            return True

        if (
            self.dispatcher.is_enabled()
            and not self.dispatcher.is_normal()
            and key == self.config.normal_key
        ):
            self.dispatcher.enter_normal()
            self._log("enter_normal ->", key=key)
            return True

        result = self.dispatcher.handle_key(key)
        self._log(
            "key ->",
            key=key,
            consumed=result.consumed,
            status=result.status,
            mode=result.mode.value,
        )
        return result.consumed

    def close(self) -> None:
        """Stop forwarding mode changes to the hooks."""

        self.dispatcher.bus.unsubscribe("mode.change", self._on_mode_change)

    def _on_mode_change(self, payload: object) -> None:
        self.hooks.update_status(str(payload))

    def _log(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {"indicator": self.dispatcher.indicator()}
        snapshot.update(fields)
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["ViController", "ViUIHooks", "normalize_key"]
