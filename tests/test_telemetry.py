from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List

import pytest

from vi_input.runtime import telemetry


class PlainLogger:
    """Logger exposing only the bare level methods."""

    def __init__(self) -> None:
        self.lines: List[tuple[str, Any]] = []
        self.context: dict[str, str] = {}

    def debug(self, message: str) -> None:
        self.lines.append(("debug", message))

    def error(self, message: str) -> None:
        self.lines.append(("error", message))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        yield


class StructuredLogger(PlainLogger):
    def debug_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.lines.append(("debug", (message, pairs)))

    def error_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.lines.append(("error", (message, pairs)))


def use_logger(monkeypatch: pytest.MonkeyPatch, logger: PlainLogger) -> List[Any]:
    names: List[Any] = []

    def fake_get_logger(name: Any = None) -> PlainLogger:
        names.append(name)
        return logger

    monkeypatch.setattr(telemetry, "get_logger", fake_get_logger)
    return names


def test_record_event_prefers_structured_methods(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    logger = StructuredLogger()
    names = use_logger(monkeypatch, logger)

    telemetry.record_event("mode.switch", data={"mode": "normal"}, logger_name="x")

    assert names == ["x"]
    assert logger.lines == [
        ("debug", ("event::mode.switch", [("event", "mode.switch"), ("mode", "normal")]))
    ]


def test_record_event_falls_back_to_plain_methods(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    logger = PlainLogger()
    use_logger(monkeypatch, logger)

    telemetry.record_event("pending.cancel")

    assert logger.lines == [("debug", "event::pending.cancel {'event': 'pending.cancel'}")]


def test_record_event_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    use_logger(monkeypatch, PlainLogger())

    with pytest.raises(ValueError):
        telemetry.record_event("engine.enable", level="verbose")


def test_span_logs_failure_and_clears_context(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = StructuredLogger()
    use_logger(monkeypatch, logger)

    with pytest.raises(RuntimeError):
        with telemetry.span("edit::delete_line", component="edits", metadata={"row": 3}):
            assert logger.context == {"row": "3"}
            raise RuntimeError("boom")

    assert logger.context == {}
    level, (message, pairs) = logger.lines[-1]
    assert (level, message) == ("error", "span::fail")
    assert ("reason", "boom") in pairs
    assert ("component", "edits") in pairs


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")
