"""Human-readable rendering of a parsed Table tree."""

from __future__ import annotations

import sys
from typing import IO

from .getter import walk
from .values import Table, Value, VArray, VBool, VFloat, VInteger, VString, VTable


def type_name(value: Value) -> str:
    """Name of the value's variant, e.g. ``"Integer"``."""
    return value.kind.name


def format_value(value: Value, indent: int = 0) -> str:
    """Format a single value; tables span several lines."""
    if isinstance(value, VBool):
        return "true" if value.value else "false"
    if isinstance(value, (VInteger, VFloat)):
        return repr(value.value)
    if isinstance(value, VString):
        return f'"{value.value}"'
    if isinstance(value, VArray):
        return "[" + ", ".join(format_value(v, indent) for v in value.items) + "]"
    if isinstance(value, VTable):
        pad = " " * indent
        lines = ["{"]
        for key, item in value.table.items():
            lines.append(f"{pad}  {key} = {format_value(item, indent + 2)}")
        lines.append(f"{pad}}}")
        return "\n".join(lines)
    raise TypeError(f"not a TOML value: {value!r}")


def render_table(table: Table) -> list[str]:
    """One line per entry, sub-tables indented two spaces per level.

    Example::

        [server] -> Table
          server.port = 8080 (Integer)
    """
    lines: list[str] = []
    for path, value in walk(table):
        pad = "  " * (len(path) - 1)
        full_key = ".".join(path)
        if isinstance(value, VTable):
            lines.append(f"{pad}[{full_key}] -> Table")
        else:
            lines.append(f"{pad}{full_key} = {format_value(value)} ({type_name(value)})")
    return lines


def print_table(table: Table, dest: IO[str] | None = None) -> None:
    dest = dest or sys.stdout
    for line in render_table(table):
        print(line, file=dest)
