from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

"""Sequential markup writer.

Elements are written with start_element / write_attribute / end_element and
must nest correctly. Attributes may only follow start_element directly.
Empty elements are closed as <name .../>.
"""

__all__ = [
    "XmlWriter",
    "XmlWriterError",
]


class XmlWriterError(Exception):
    """Raised when writer calls do not nest correctly."""


class XmlWriter:
    """In-memory XML writer producing a string fragment."""

    def __init__(self, *, declaration: bool = False) -> None:
        self._out: list[str] = []
        self._stack: list[str] = []
        self._tag_open = False
        if declaration:
            self._out.append('<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n')

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _close_start_tag(self) -> None:
        if self._tag_open:
            self._out.append(">")
            self._tag_open = False

    def start_element(self, name: str) -> None:
        self._close_start_tag()
        self._out.append(f"<{name}")
        self._stack.append(name)
        self._tag_open = True

    def write_attribute(self, name: str, value: object) -> None:
        if not self._tag_open:
            raise XmlWriterError(f"attribute {name!r} written outside a start tag")
        self._out.append(f" {name}={quoteattr(str(value))}")

    def write_text(self, text: str) -> None:
        if not self._stack:
            raise XmlWriterError("text written outside of an element")
        self._close_start_tag()
        self._out.append(escape(text))

    def write_raw(self, fragment: str) -> None:
        """Append an already serialized fragment at the current position."""
        self._close_start_tag()
        self._out.append(fragment)

    def end_element(self) -> None:
        if not self._stack:
            raise XmlWriterError("end_element without matching start_element")
        name = self._stack.pop()
        if self._tag_open:
            self._out.append("/>")
            self._tag_open = False
        else:
            self._out.append(f"</{name}>")

    def getvalue(self) -> str:
        if self._stack:
            raise XmlWriterError(f"unclosed elements: {self._stack}")
        return "".join(self._out)
