from __future__ import annotations

from ..models.cell import CellKind
from ..models.shared_strings import SharedStrings
from .errors import CellSerializationError
from .row import Row
from .xml_writer import XmlWriter

"""Row serialization.

serialize() consumes a Row and writes <row r="N"> with one <c> child per cell
in the row's insertion order. The row is rendered into a scratch writer first
so a failing cell leaves the caller's writer untouched.
"""

__all__ = [
    "serialize",
    "row_to_xml",
    "shared_strings_to_xml",
]


def serialize(row: Row, writer: XmlWriter, shared_strings: SharedStrings | None = None) -> None:
    """Write a row element and consume the row.

    Args:
        row: Row to serialize; unusable afterwards
        writer: Target writer
        shared_strings: Table for shared-string text cells

    Raises:
        RowConsumedError: If the row was already serialized
        CellSerializationError: If any cell cannot be rendered; nothing is written
    """
    row_number = row.row_number
    cells = row.consume()
    if shared_strings is None:
        for cell in cells:
            if cell.kind is CellKind.TEXT_SHARED:
                raise CellSerializationError(
                    f"row {row_number}: shared string cell {cell.reference} needs a shared string table"
                )

    scratch = XmlWriter()
    scratch.start_element("row")
    scratch.write_attribute("r", str(row_number))
    for cell in cells:
        cell.to_xml(scratch, shared_strings)
    scratch.end_element()
    writer.write_raw(scratch.getvalue())


def row_to_xml(row: Row, shared_strings: SharedStrings | None = None) -> str:
    writer = XmlWriter()
    serialize(row, writer, shared_strings)
    return writer.getvalue()


def shared_strings_to_xml(shared_strings: SharedStrings) -> str:
    """Render the table as an <sst> part in index order."""
    writer = XmlWriter(declaration=True)
    writer.start_element("sst")
    writer.write_attribute("xmlns", "http://schemas.openxmlformats.org/spreadsheetml/2006/main")
    writer.write_attribute("count", shared_strings.count)
    writer.write_attribute("uniqueCount", shared_strings.unique_count)
    for text in shared_strings.strings():
        writer.start_element("si")
        writer.start_element("t")
        if text != text.strip():
            writer.write_attribute("xml:space", "preserve")
        writer.write_text(text)
        writer.end_element()
        writer.end_element()
    writer.end_element()
    return writer.getvalue()
