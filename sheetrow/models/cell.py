from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from ..excel.errors import CellSerializationError, NumberParseError

if TYPE_CHECKING:
    from ..excel.xml_writer import XmlWriter
    from .shared_strings import SharedStrings

"""Cell model for worksheet rows.

A Cell carries its value, its kind and an optional reference ("B7"). Cells are
frozen: once a reference is assigned it cannot change in place, so callers use
with_reference() / with_style() to derive modified copies.
"""

__all__ = [
    "CellKind",
    "Cell",
]


class CellKind(str, Enum):
    TEXT_SHARED = "text_shared"
    TEXT_INLINE = "text_inline"
    NUMBER = "number"


def _parse_float(value: str) -> float:
    # float() alone would accept padding, digit separators and inf/nan
    if value != value.strip() or "_" in value:
        raise NumberParseError(f"invalid float literal: {value!r}")
    try:
        number = float(value)
    except ValueError as e:
        raise NumberParseError(f"invalid float literal: {value!r}") from e
    if not math.isfinite(number):
        raise NumberParseError(f"non-finite number not allowed: {value!r}")
    return number


@dataclass(frozen=True)
class Cell:
    """Single worksheet cell.

    Attributes:
        kind: Text (shared or inline) or number
        value: Text content, or the numeric literal exactly as given
        reference: Cell reference such as "A7"; None until assigned
        style: Optional style index written as the s attribute
    """
    kind: CellKind
    value: str
    reference: str | None = None
    style: int | None = None

    @staticmethod
    def from_text(value: str, reference: str | None = None, inline: bool = False) -> Cell:
        kind = CellKind.TEXT_INLINE if inline else CellKind.TEXT_SHARED
        return Cell(kind=kind, value=str(value), reference=reference)

    @staticmethod
    def from_number(value: str, reference: str | None = None) -> Cell:
        """Create a numeric cell from a float literal.

        Raises:
            NumberParseError: If value is not a finite float literal
        """
        _parse_float(value)
        return Cell(kind=CellKind.NUMBER, value=value, reference=reference)

    @property
    def number(self) -> float | None:
        if self.kind is not CellKind.NUMBER:
            return None
        return float(self.value)

    def with_reference(self, reference: str) -> Cell:
        return replace(self, reference=reference)

    def with_style(self, style: int | None) -> Cell:
        return replace(self, style=style)

    def to_xml(self, writer: XmlWriter, shared_strings: SharedStrings | None = None) -> None:
        """Write this cell as a <c> element.

        Raises:
            CellSerializationError: If a shared-string cell has no table to index into
        """
        if self.kind is CellKind.TEXT_SHARED and shared_strings is None:
            raise CellSerializationError(
                f"shared string cell {self.reference or '?'} needs a shared string table"
            )
        writer.start_element("c")
        if self.reference is not None:
            writer.write_attribute("r", self.reference)
        if self.style is not None:
            writer.write_attribute("s", self.style)
        if self.kind is CellKind.TEXT_INLINE:
            writer.write_attribute("t", "inlineStr")
            writer.start_element("is")
            writer.start_element("t")
            if self.value != self.value.strip():
                writer.write_attribute("xml:space", "preserve")
            writer.write_text(self.value)
            writer.end_element()
            writer.end_element()
        elif self.kind is CellKind.TEXT_SHARED:
            writer.write_attribute("t", "s")
            writer.start_element("v")
            writer.write_text(str(shared_strings.add(self.value)))
            writer.end_element()
        else:
            writer.start_element("v")
            writer.write_text(self.value)
            writer.end_element()
        writer.end_element()
