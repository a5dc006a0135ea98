"""Resolve a keypress, optionally following a pending prefix, into actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from vi_input.runtime.telemetry import span

from .models import Action, Binding, Cancel, Pending
from .registry import KeymapTable


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of resolving one key.

    ``match`` carries the binding's actions, ``pending`` means the key is a
    command prefix, ``miss`` means an idle key has no binding and ``cancel``
    means the key following a prefix matched no continuation.
    """

    status: Literal["match", "pending", "miss", "cancel"]
    actions: tuple[Action, ...] = ()
    binding: Optional[Binding] = None
    next_expected: tuple[str, ...] = ()

    @property
    def consumed(self) -> bool:
        return self.status != "miss"


class PendingCommandResolver:
    """Looks keys up in a ``KeymapTable``.

    The resolver holds no state of its own: the outstanding prefix lives in
    ``ModeState.pending`` and is passed in on every call.
    """

    def __init__(
        self, table: KeymapTable, *, logger_name: str | None = None
    ) -> None:
        self._table = table
        self._logger_name = logger_name

    def resolve(self, key: str, *, pending: Optional[str] = None) -> ResolutionResult:
        with span(
            "resolver::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": key, "pending": pending or ""},
        ) as handle:
            if pending:
                result = self._resolve_pending(pending, key)
            else:
                result = self._resolve_idle(key)
            handle.add_metadata("status", result.status)
            if result.binding is not None:
                handle.add_metadata("binding_id", result.binding.id)
            return result

    def _resolve_idle(self, key: str) -> ResolutionResult:
        binding = self._table.lookup(key)
        if binding is None:
            return ResolutionResult(status="miss")
        prefix = next(
            (action.prefix for action in binding.actions if isinstance(action, Pending)),
            None,
        )
        if prefix is not None:
            return ResolutionResult(
                status="pending",
                actions=binding.actions,
                binding=binding,
                next_expected=self._table.continuations(prefix),
            )
        return ResolutionResult(status="match", actions=binding.actions, binding=binding)

    def _resolve_pending(self, prefix: str, key: str) -> ResolutionResult:
        binding = self._table.lookup_pending(prefix, key)
        if binding is None:
            return ResolutionResult(status="cancel", actions=(Cancel(),))
        return ResolutionResult(status="match", actions=binding.actions, binding=binding)


__all__ = ["PendingCommandResolver", "ResolutionResult"]
