"""Turning file names into unique, valid identifiers."""

from __future__ import annotations

from collections.abc import MutableSet
from itertools import count

__all__ = ["sanitize_ident", "generate_name"]


def _is_xid_start(char: str) -> bool:
    # The underscore may begin a Python name but is not an XID_Start character.
    return char != "_" and char.isidentifier()


def _is_xid_continue(char: str) -> bool:
    return ("a" + char).isidentifier()


def sanitize_ident(name: str) -> str:
    """Make ``name`` a valid identifier.

    Characters that cannot continue an identifier become underscores. If the
    result does not start with an identifier-start character, it is prefixed
    with ``test_``.
    """
    if not name:
        raise ValueError("name must not be empty")
    cleaned = "".join(c if _is_xid_continue(c) else "_" for c in name)
    if not _is_xid_start(cleaned[0]):
        return f"test_{cleaned}"
    return cleaned


def generate_name(starting_name: str, taken: MutableSet[str]) -> str:
    """Return a name based on ``starting_name`` that is not in ``taken``.

    The chosen name is added to ``taken``. Clashes are resolved by appending
    ``_2``, ``_3`` and so on.
    """
    if starting_name not in taken:
        taken.add(starting_name)
        return starting_name
    for i in count(2):
        candidate = f"{starting_name}_{i}"
        if candidate not in taken:
            taken.add(candidate)
            return candidate
    raise AssertionError("unreachable")