"""Modal editing configuration read from ``VI_INPUT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from vi_input.buffer.handle import CursorShape
from vi_input.modes.state import Mode

ENV_PREFIX = "VI_INPUT_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, variable: str, value: str, expected: str) -> None:
        super().__init__(f"{variable}={value!r} is invalid; expected {expected}")
        self.variable = variable
        self.value = value


@dataclass(frozen=True, slots=True)
class ViConfig:
    """Per-widget modal editing settings.

    ``cursor_shape`` is the Insert-mode shape; Normal mode always draws a
    block. ``normal_key`` and ``toggle_key`` are host key names, handled
    outside the dispatcher by whichever controller owns the widget.
    """

    enabled: bool = False
    start_mode: Mode = Mode.INSERT
    cursor_shape: CursorShape = CursorShape.BAR
    normal_key: str = "escape"
    toggle_key: Optional[str] = "ctrl+backslash"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ViConfig":
        env = os.environ if environ is None else environ
        defaults = cls()

        def lookup(name: str) -> tuple[str, Optional[str]]:
            variable = f"{ENV_PREFIX}{name}"
            return variable, env.get(variable)

        variable, raw = lookup("ENABLED")
        enabled = defaults.enabled if raw is None else _parse_bool(variable, raw)

        variable, raw = lookup("START_MODE")
        start_mode = (
            defaults.start_mode if raw is None else _parse_mode(variable, raw)
        )

        variable, raw = lookup("CURSOR_SHAPE")
        cursor_shape = (
            defaults.cursor_shape if raw is None else _parse_shape(variable, raw)
        )

        variable, raw = lookup("NORMAL_KEY")
        normal_key = defaults.normal_key
        if raw is not None:
            if not raw.strip():
                raise ConfigError(variable, raw, "a non-empty key name")
            normal_key = raw.strip()

        _, raw = lookup("TOGGLE_KEY")
        toggle_key = defaults.toggle_key
        if raw is not None:
            toggle_key = raw.strip() or None

        return cls(
            enabled=enabled,
            start_mode=start_mode,
            cursor_shape=cursor_shape,
            normal_key=normal_key,
            toggle_key=toggle_key,
        )


def _parse_bool(variable: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(variable, raw, "a boolean (1/0, true/false, yes/no, on/off)")


def _parse_mode(variable: str, raw: str) -> Mode:
    try:
        return Mode(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in Mode)
        raise ConfigError(variable, raw, f"one of {choices}") from exc


def _parse_shape(variable: str, raw: str) -> CursorShape:
    try:
        return CursorShape(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(shape.value for shape in CursorShape)
        raise ConfigError(variable, raw, f"one of {choices}") from exc


__all__ = ["ConfigError", "ViConfig", "ENV_PREFIX"]
