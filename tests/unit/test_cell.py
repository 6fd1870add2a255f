from __future__ import annotations

import dataclasses

import pytest

from sheetrow.excel.errors import CellSerializationError, NumberParseError
from sheetrow.excel.xml_writer import XmlWriter
from sheetrow.models.cell import Cell, CellKind
from sheetrow.models.shared_strings import SharedStrings


def _xml(cell: Cell, shared: SharedStrings | None = None) -> str:
    w = XmlWriter()
    cell.to_xml(w, shared)
    return w.getvalue()


def test_from_text_modes():
    assert Cell.from_text("a", "A1").kind is CellKind.TEXT_SHARED
    assert Cell.from_text("a", "A1", inline=True).kind is CellKind.TEXT_INLINE
    assert Cell.from_text("a").reference is None


@pytest.mark.parametrize("literal", ["3.14", "-2", "1e10", ".5", "0"])
def test_from_number_accepts_float_literals(literal: str):
    cell = Cell.from_number(literal, "B7")
    assert cell.kind is CellKind.NUMBER
    assert cell.value == literal
    assert cell.number == float(literal)


@pytest.mark.parametrize("literal", ["abc", "", " 1", "1 ", "1_000", "nan", "inf", "-Infinity", "1,5"])
def test_from_number_rejects(literal: str):
    with pytest.raises(NumberParseError):
        Cell.from_number(literal, "B7")


def test_number_parse_error_is_value_error():
    with pytest.raises(ValueError):
        Cell.from_number("x")


def test_cell_is_frozen():
    cell = Cell.from_text("a", "A1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cell.reference = "B1"
    assert cell.with_reference("B1").reference == "B1"
    assert cell.reference == "A1"


def test_text_cell_has_no_number():
    assert Cell.from_text("3").number is None


def test_inline_text_xml():
    assert _xml(Cell.from_text("x & y", "A7", inline=True)) == (
        '<c r="A7" t="inlineStr"><is><t>x &amp; y</t></is></c>'
    )


def test_inline_text_preserves_outer_spaces():
    assert _xml(Cell.from_text(" pad ", "A1", inline=True)) == (
        '<c r="A1" t="inlineStr"><is><t xml:space="preserve"> pad </t></is></c>'
    )


def test_shared_text_xml_uses_table_index():
    shared = SharedStrings()
    shared.add("first")
    assert _xml(Cell.from_text("second", "C2"), shared) == '<c r="C2" t="s"><v>1</v></c>'
    assert shared.strings() == ["first", "second"]


def test_shared_text_without_table_fails():
    w = XmlWriter()
    with pytest.raises(CellSerializationError):
        Cell.from_text("x", "A1").to_xml(w)
    assert w.getvalue() == ""


def test_number_xml_with_style():
    cell = Cell.from_number("3.14", "B7").with_style(2)
    assert _xml(cell) == '<c r="B7" s="2"><v>3.14</v></c>'
