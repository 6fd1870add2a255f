from __future__ import annotations

import logging
from collections.abc import Callable

from ..models.cell import Cell
from .columns import number_to_letters
from .errors import DuplicateReference, MissingReference, RowConsumedError
from .reference import GRAMMAR_STRICT, GRAMMARS, parse

"""Worksheet row builder.

A Row owns its cells in output order, a 1-based column cursor used to allocate
references for appended cells, and the set of references already used in the
row. Append and insert operations return an integer handle (index into
Row.cells) instead of the cell itself.

Failed operations leave cells, used references and the cursor unchanged.
"""

__all__ = [
    "CURSOR_MONOTONIC",
    "CURSOR_OVERWRITE",
    "Row",
    "ColumnCursor",
]

logger = logging.getLogger(__name__)

# After an explicit insert the cursor moves to max(cursor, column + 1)
CURSOR_MONOTONIC = "monotonic"
# After an explicit insert the cursor is set to the inserted column index
CURSOR_OVERWRITE = "overwrite"
CURSOR_POLICIES = (CURSOR_MONOTONIC, CURSOR_OVERWRITE)

CursorHook = Callable[[int, int], None]


class Row:
    """A single worksheet row under construction.

    Args:
        row_number: 1-based row number, fixed for the lifetime of the row
        grammar: Reference grammar used to validate explicit inserts
        cursor_policy: How explicit inserts move the column cursor
        on_cursor_move: Optional hook called with (old, new) on every cursor change
    """

    def __init__(
        self,
        row_number: int,
        *,
        grammar: str = GRAMMAR_STRICT,
        cursor_policy: str = CURSOR_MONOTONIC,
        on_cursor_move: CursorHook | None = None,
    ) -> None:
        if row_number < 1:
            raise ValueError(f"row number must be positive: {row_number}")
        if grammar not in GRAMMARS:
            raise ValueError(f"unknown reference grammar: {grammar}")
        if cursor_policy not in CURSOR_POLICIES:
            raise ValueError(f"unknown cursor policy: {cursor_policy}")
        self.row_number = row_number
        self.grammar = grammar
        self.cursor_policy = cursor_policy
        self.on_cursor_move = on_cursor_move
        self._cells: list[Cell] = []
        self._column_cursor = 1
        self._used_references: set[str] = set()
        self._consumed = False

    def __repr__(self) -> str:
        return (
            f"Row(row_number={self.row_number}, cells={len(self._cells)}, "
            f"column_cursor={self._column_cursor})"
        )

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def column_cursor(self) -> int:
        return self._column_cursor

    @property
    def used_references(self) -> frozenset[str]:
        return frozenset(self._used_references)

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def cells(self) -> list[Cell]:
        """The live cell list.

        Callers may replace entries (e.g. cell.with_style(...)) after the fact;
        references are not re-validated.
        """
        self._check_open()
        return self._cells

    def cell(self, handle: int) -> Cell:
        """Resolve a handle returned by an append/insert operation."""
        self._check_open()
        return self._cells[handle]

    def _check_open(self) -> None:
        if self._consumed:
            raise RowConsumedError(f"row {self.row_number} has already been serialized")

    def _move_cursor(self, new: int) -> None:
        old = self._column_cursor
        if old == new:
            return
        self._column_cursor = new
        logger.debug("row=%d cursor %d -> %d", self.row_number, old, new)
        if self.on_cursor_move is not None:
            self.on_cursor_move(old, new)

    def _peek_reference(self) -> str:
        return f"{number_to_letters(self._column_cursor)}{self.row_number}"

    def next_reference(self) -> str:
        """Return the reference at the cursor and advance the cursor by one."""
        self._check_open()
        reference = self._peek_reference()
        self._move_cursor(self._column_cursor + 1)
        return reference

    def _push(self, cell: Cell) -> int:
        self._used_references.add(cell.reference)
        self._cells.append(cell)
        return len(self._cells) - 1

    def append_text(self, value: str, inline: bool = False) -> int:
        """Append a text cell at the cursor position.

        Args:
            value: Cell text
            inline: Store as inline string instead of shared string

        Returns:
            Handle of the new cell
        """
        self._check_open()
        cell = Cell.from_text(value, self.next_reference(), inline)
        return self._push(cell)

    def append_number(self, value: str) -> int:
        """Append a numeric cell at the cursor position.

        Raises:
            NumberParseError: If value is not a float literal; the row is unchanged
        """
        self._check_open()
        # Build the cell before allocating so a parse failure leaves the cursor alone
        cell = Cell.from_number(value, self._peek_reference())
        self.next_reference()
        return self._push(cell)

    def insert_explicit(self, cell: Cell) -> int:
        """Insert a cell whose reference was assigned by the caller.

        Validation order: duplicate, malformed reference, row mismatch. The
        reference is stored in canonical form ("C05" and "5C" become "C5"), and
        uniqueness is checked on that form.

        Raises:
            MissingReference: If the cell has no reference
            DuplicateReference: If the reference is already used in this row
            InvalidReference: If the reference is malformed
            RowMismatch: If the reference belongs to another row
        """
        self._check_open()
        reference = cell.reference
        if reference is None:
            raise MissingReference(f"cell inserted into row {self.row_number} has no reference")
        if reference in self._used_references:
            raise DuplicateReference(f"cell reference {reference!r} already exists in row {self.row_number}")
        parsed = parse(reference, self.grammar, self.row_number)
        canonical = str(parsed)
        if canonical in self._used_references:
            raise DuplicateReference(
                f"cell reference {reference!r} already exists in row {self.row_number} as {canonical!r}"
            )
        if canonical != reference:
            cell = cell.with_reference(canonical)

        handle = self._push(cell)
        if self.cursor_policy == CURSOR_OVERWRITE:
            self._move_cursor(parsed.column_index)
        else:
            self._move_cursor(max(self._column_cursor, parsed.column_index + 1))
        return handle

    def consume(self) -> list[Cell]:
        """Hand the cells over to a serializer; the row is unusable afterwards."""
        self._check_open()
        self._consumed = True
        cells = self._cells
        self._cells = []
        self._used_references = set()
        return cells


class ColumnCursor:
    """Moves a row's column cursor without creating cells.

    Skipped columns are not recorded as used, so a later explicit insert into
    one of them is accepted.
    """

    def __init__(self, row: Row) -> None:
        self.row = row

    def advance(self) -> None:
        self.row.next_reference()

    def skip(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"cannot skip a negative number of columns: {n}")
        for _ in range(n):
            self.advance()
