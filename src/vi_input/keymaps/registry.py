"""Keymap table storing the Normal-mode bindings and their two-key continuations."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from vi_input.runtime.telemetry import span

from .models import Binding, Pending


class KeymapConflictError(RuntimeError):
    """Raised when a new binding reuses a key sequence already bound."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on '{binding.key_signature}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapTable:
    """Lookup table keyed by key sequence.

    Single keys are looked up while idle; ``(prefix, key)`` pairs are looked
    up while a prefix is pending. A two-key binding is only accepted once its
    prefix is bound to a ``Pending`` action.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[tuple[str, ...], Binding] = {}
        self._ids: Dict[str, Binding] = {}
        self._logger_name = logger_name

    def register(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "keys": binding.key_signature},
        ) as handle:
            prefix = binding.prefix
            if prefix is not None and prefix not in self.prefixes():
                handle.add_metadata("missing_prefix", prefix)
                raise KeyError(
                    f"Binding '{binding.id}' continues '{prefix}', "
                    "which is not bound as a pending prefix"
                )

            existing = self._bindings.get(binding.sequence)
            if existing is not None and not replace:
                raise KeymapConflictError(binding, existing)
            if binding.id in self._ids and self._ids[binding.id] is not existing:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            if existing is not None:
                self._ids.pop(existing.id, None)
            self._bindings[binding.sequence] = binding
            self._ids[binding.id] = binding
            return binding

    def register_all(
        self, bindings: Iterable[Binding], *, replace: bool = False
    ) -> None:
        for binding in bindings:
            self.register(binding, replace=replace)

    def lookup(self, key: str) -> Optional[Binding]:
        return self._bindings.get((key,))

    def lookup_pending(self, prefix: str, key: str) -> Optional[Binding]:
        return self._bindings.get((prefix, key))

    def get(self, binding_id: str) -> Binding:
        try:
            return self._ids[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def prefixes(self) -> frozenset[str]:
        return frozenset(
            action.prefix
            for sequence, binding in self._bindings.items()
            if len(sequence) == 1
            for action in binding.actions
            if isinstance(action, Pending)
        )

    def continuations(self, prefix: str) -> tuple[str, ...]:
        return tuple(
            sorted(
                sequence[1]
                for sequence in self._bindings
                if len(sequence) == 2 and sequence[0] == prefix
            )
        )

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._bindings.values())

    def __len__(self) -> int:
        return len(self._bindings)


__all__ = ["KeymapConflictError", "KeymapTable"]
