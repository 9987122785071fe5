"""Tests for the printer helpers."""

import io

import pytest

from tomlette import loads
from tomlette.printer import format_value, print_table, render_table, type_name
from tomlette.values import Table, VArray, VBool, VFloat, VInteger, VString, VTable


# ---------------------------------------------------------------------------
# format_value / type_name
# ---------------------------------------------------------------------------

def test_format_scalars():
    assert format_value(VInteger(-7)) == "-7"
    assert format_value(VFloat(2.5)) == "2.5"
    assert format_value(VBool(True)) == "true"
    assert format_value(VBool(False)) == "false"
    assert format_value(VString("hi")) == '"hi"'

def test_format_array():
    arr = VArray([VInteger(1), VArray([VString("x")]), VArray([])])
    assert format_value(arr) == '[1, ["x"], []]'

def test_format_inline_table():
    t = VTable(Table({"a": VInteger(1), "b": VBool(False)}))
    assert format_value(t) == "{\n  a = 1\n  b = false\n}"

def test_format_rejects_foreign_objects():
    with pytest.raises(TypeError):
        format_value("plain str")

def test_type_names():
    assert [type_name(v) for v in (
        VInteger(1), VFloat(1.0), VBool(True), VString(""), VArray([]), VTable(Table()),
    )] == ["Integer", "Float", "Boolean", "String", "Array", "Table"]


# ---------------------------------------------------------------------------
# render_table / print_table
# ---------------------------------------------------------------------------

def test_render_table():
    root = loads('name = "x"\n[a.b]\nc = [1, 2]\nd.e = 1.5')
    assert render_table(root) == [
        'name = "x" (String)',
        "[a] -> Table",
        "  [a.b] -> Table",
        "    a.b.c = [1, 2] (Array)",
        "    a.b.d.e = 1.5 (Float)",
    ]

def test_print_table_to_dest():
    buf = io.StringIO()
    print_table(loads("x = true"), buf)
    assert buf.getvalue() == "x = true (Boolean)\n"
