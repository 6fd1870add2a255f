"""Worksheet row construction: cell references, row building and <row> markup."""

from .excel.columns import letters_to_number, number_to_letters
from .excel.errors import (
    CellSerializationError,
    DuplicateReference,
    InvalidReference,
    MissingReference,
    NumberParseError,
    RowBuildError,
    RowConsumedError,
    RowMismatch,
)
from .excel.reference import CellReference, parse, split, validate_row
from .excel.row import ColumnCursor, Row
from .excel.serializer import row_to_xml, serialize
from .excel.xml_writer import XmlWriter
from .models.cell import Cell, CellKind
from .models.shared_strings import SharedStrings

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CellKind",
    "CellReference",
    "CellSerializationError",
    "ColumnCursor",
    "DuplicateReference",
    "InvalidReference",
    "MissingReference",
    "NumberParseError",
    "Row",
    "RowBuildError",
    "RowConsumedError",
    "RowMismatch",
    "SharedStrings",
    "XmlWriter",
    "letters_to_number",
    "number_to_letters",
    "parse",
    "row_to_xml",
    "serialize",
    "split",
    "validate_row",
]
