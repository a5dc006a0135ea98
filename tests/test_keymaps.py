from __future__ import annotations

import pytest

from vi_input.keymaps import (
    NORMAL_BINDINGS,
    Binding,
    Cancel,
    Edit,
    EditKind,
    KeymapConflictError,
    KeymapTable,
    Motion,
    MotionKind,
    Pending,
    PendingCommandResolver,
    default_keymap,
)

NORMAL_KEYS = {
    "i", "I", "a", "A", "o", "O",
    "h", "left", "l", "right", "j", "down", "k", "up",
    "w", "b", "e", "0", "home", "$", "end", "G", "g",
    "x", "delete", "d", "C", "D", "s", "S",
}  # fmt: skip


def make_binding(
    binding_id: str,
    *keys: str,
    actions: tuple = (Motion(MotionKind.LEFT),),
) -> Binding:
    return Binding(id=binding_id, sequence=tuple(keys), actions=actions)


def test_default_keymap_covers_normal_table() -> None:
    table = default_keymap()

    assert {b.sequence[0] for b in NORMAL_BINDINGS} == NORMAL_KEYS
    assert table.prefixes() == frozenset({"d", "g"})
    assert table.continuations("d") == ("$", "0", "d", "w")
    assert table.continuations("g") == ("g",)


def test_alias_keys_share_actions() -> None:
    table = default_keymap()

    left = table.lookup("h")
    arrow = table.lookup("left")

    assert left is not None and arrow is not None
    assert left.actions == arrow.actions == (Motion(MotionKind.LEFT),)
    assert table.get("normal.left") is left


def test_register_conflict_detection() -> None:
    table = KeymapTable()
    table.register(make_binding("normal.h", "h"))

    with pytest.raises(KeymapConflictError):
        table.register(make_binding("normal.h.again", "h"))


def test_register_replace_swaps_binding() -> None:
    table = KeymapTable()
    table.register(make_binding("normal.h", "h"))
    replacement = make_binding(
        "normal.h.right", "h", actions=(Motion(MotionKind.RIGHT),)
    )

    table.register(replacement, replace=True)

    assert table.lookup("h") is replacement
    assert len(table) == 1
    with pytest.raises(KeyError):
        table.get("normal.h")


def test_chord_requires_registered_prefix() -> None:
    table = KeymapTable()

    with pytest.raises(KeyError):
        table.register(make_binding("pending.zz", "z", "z"))

    table.register(make_binding("normal.z", "z", actions=(Pending("z"),)))
    table.register(make_binding("pending.zz", "z", "z"))
    assert table.continuations("z") == ("z",)


@pytest.mark.parametrize("keys", [(), ("a", "b", "c"), ("",)])
def test_binding_rejects_bad_sequences(keys: tuple[str, ...]) -> None:
    with pytest.raises(ValueError):
        Binding(id="bad", sequence=keys, actions=(Cancel(),))


def test_pending_prefix_must_be_single_character() -> None:
    with pytest.raises(ValueError):
        Pending("dd")


def test_resolver_statuses() -> None:
    resolver = PendingCommandResolver(default_keymap())

    assert resolver.resolve("q").status == "miss"
    assert resolver.resolve("q").consumed is False

    pending = resolver.resolve("d")
    assert pending.status == "pending"
    assert pending.actions == (Pending("d"),)
    assert pending.next_expected == ("$", "0", "d", "w")

    match = resolver.resolve("d", pending="d")
    assert match.status == "match"
    assert match.actions == (Edit(EditKind.DELETE_LINE),)

    cancel = resolver.resolve("x", pending="g")
    assert cancel.status == "cancel"
    assert cancel.actions == (Cancel(),)
    assert cancel.consumed is True


def test_resolver_reads_table_updates() -> None:
    table = default_keymap()
    resolver = PendingCommandResolver(table)
    assert resolver.resolve("q").status == "miss"

    table.register(make_binding("normal.q", "q"))

    assert resolver.resolve("q").status == "match"
