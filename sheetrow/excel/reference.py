from __future__ import annotations

import re
from dataclasses import dataclass

from .columns import letters_to_number
from .errors import InvalidReference, RowMismatch

"""Cell reference parsing and validation.

Two grammars are supported:
- strict: column letters followed by row digits ("AA12")
- permissive: characters are partitioned by class (alphabetic vs. other)
  regardless of order, so "12AA" splits the same way as "AA12"
"""

__all__ = [
    "GRAMMAR_STRICT",
    "GRAMMAR_PERMISSIVE",
    "CellReference",
    "split",
    "validate_row",
    "parse",
]

GRAMMAR_STRICT = "strict"
GRAMMAR_PERMISSIVE = "permissive"
GRAMMARS = (GRAMMAR_STRICT, GRAMMAR_PERMISSIVE)

_STRICT_PATTERN = re.compile(r"^([A-Z]+)([0-9]+)$")


@dataclass(frozen=True)
class CellReference:
    """A validated reference: column letters plus 1-based row number."""
    column: str  # "AA"
    row: int  # 12
    column_index: int  # 27

    def __str__(self) -> str:
        return f"{self.column}{self.row}"


def _split_permissive(reference: str) -> tuple[str, str]:
    column_part: list[str] = []
    row_part: list[str] = []
    for ch in reference:
        if ch.isalpha():
            column_part.append(ch)
        else:
            row_part.append(ch)
    if not column_part or not row_part:
        raise InvalidReference(f"invalid cell reference: {reference!r}")
    return "".join(column_part), "".join(row_part)


def split(reference: str, grammar: str = GRAMMAR_STRICT) -> tuple[str, str]:
    """Split a reference into (column_part, row_part).

    Args:
        reference: Reference string such as "B5"
        grammar: "strict" or "permissive"

    Returns:
        Tuple of (column letters, row text)

    Raises:
        InvalidReference: If either part is empty or the grammar is violated
        ValueError: If grammar is unknown
    """
    if grammar == GRAMMAR_PERMISSIVE:
        return _split_permissive(reference)
    if grammar != GRAMMAR_STRICT:
        raise ValueError(f"unknown reference grammar: {grammar}")
    m = _STRICT_PATTERN.match(reference)
    if m is None:
        raise InvalidReference(f"invalid cell reference: {reference!r}")
    return m.group(1), m.group(2)


def _row_value(row_part: str, reference: str) -> int:
    # str.isdigit accepts superscripts, which int() rejects
    if not row_part.isascii() or not row_part.isdigit():
        raise InvalidReference(f"invalid row number in cell reference: {reference!r}")
    return int(row_part)

def _check_row(row: int, reference: str, expected_row_number: int) -> None:
    if row != expected_row_number:
        raise RowMismatch(
            f"cell reference {reference!r} does not belong to row {expected_row_number}"
        )


def validate_row(reference: str, expected_row_number: int, grammar: str = GRAMMAR_STRICT) -> None:
    """Check that the reference's row component equals expected_row_number.

    Raises:
        InvalidReference: If the reference cannot be split
        RowMismatch: If the row numbers differ
    """
    _, row_part = split(reference, grammar)
    _check_row(_row_value(row_part, reference), reference, expected_row_number)


def parse(
    reference: str, grammar: str = GRAMMAR_STRICT, expected_row_number: int | None = None
) -> CellReference:
    """Parse a reference string into a validated CellReference.

    When expected_row_number is given the row is checked right after the
    split, before the column letters are decoded.

    Raises:
        InvalidReference: On malformed references or undecodable column letters
        RowMismatch: If the row differs from expected_row_number
    """
    column_part, row_part = split(reference, grammar)
    row = _row_value(row_part, reference)
    if expected_row_number is not None:
        _check_row(row, reference, expected_row_number)
    return CellReference(column=column_part, row=row, column_index=letters_to_number(column_part))
