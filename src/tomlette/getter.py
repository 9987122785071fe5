"""Read-only traversal of a parsed Table tree."""

from __future__ import annotations

from typing import Iterator

from .values import Table, Value, VTable


def walk(table: Table, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Value]]:
    """Yield ``(path, value)`` for every entry below *table*, depth-first.

    A sub-table is yielded before its own entries. Arrays are yielded as a
    single value; their elements are not visited.
    """
    for key, value in table.items():
        path = prefix + (key,)
        yield path, value
        if isinstance(value, VTable):
            yield from walk(value.table, path)


def lookup(table: Table, dotted_key: str) -> Value | None:
    """Resolve *dotted_key* against *table*.

    - An exact (literal) key match wins: ``a.b = 1`` is found as ``"a.b"``
    - Otherwise the first segment must name a sub-table and the rest of
      the key is resolved inside it
    - Returns None when nothing matches
    """
    if dotted_key in table:
        return table.get(dotted_key)
    head, sep, rest = dotted_key.partition(".")
    if not sep:
        return None
    value = table.get(head)
    if isinstance(value, VTable):
        return lookup(value.table, rest)
    return None
