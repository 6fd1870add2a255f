from __future__ import annotations

import pytest

from sheetrow.excel.xml_writer import XmlWriter, XmlWriterError


def test_nested_elements_and_attributes():
    w = XmlWriter()
    w.start_element("row")
    w.write_attribute("r", "1")
    w.start_element("c")
    w.write_attribute("r", "A1")
    w.end_element()
    w.end_element()
    assert w.getvalue() == '<row r="1"><c r="A1"/></row>'
    assert w.depth == 0


def test_attribute_values_are_quoted():
    w = XmlWriter()
    w.start_element("t")
    w.write_attribute("v", 'a"b<c')
    w.end_element()
    assert w.getvalue() == "<t v='a\"b&lt;c'/>"


def test_attribute_after_content_rejected():
    w = XmlWriter()
    w.start_element("t")
    w.write_text("x")
    with pytest.raises(XmlWriterError):
        w.write_attribute("a", "1")


def test_unbalanced_end_rejected():
    w = XmlWriter()
    with pytest.raises(XmlWriterError):
        w.end_element()


def test_unclosed_element_rejected_on_getvalue():
    w = XmlWriter()
    w.start_element("row")
    with pytest.raises(XmlWriterError):
        w.getvalue()


def test_text_outside_element_rejected():
    with pytest.raises(XmlWriterError):
        XmlWriter().write_text("x")


def test_declaration():
    w = XmlWriter(declaration=True)
    w.start_element("sst")
    w.end_element()
    assert w.getvalue() == '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n<sst/>'
