from __future__ import annotations

import logging
import numbers
import time
from typing import Any

import numpy as np
import pandas as pd

from ..config.loader import WriterConfig
from ..excel.columns import number_to_letters
from ..excel.errors import RowBuildError
from ..excel.reader import is_blank
from ..excel.row import ColumnCursor, Row
from ..excel.serializer import serialize
from ..excel.xml_writer import XmlWriter
from ..models.error_record import ErrorRecord
from ..models.sheet_result import SheetResult
from ..models.shared_strings import SharedStrings
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Sheet builder: turns a source table into a <sheetData> fragment.

Each record becomes one Row. Values are appended left to right so column N of
the source lands in column N of the worksheet:
- blank values advance the cursor (or become empty text when
  skip_blank_cells is off)
- numbers and configured numeric columns go through append_number
- everything else is appended as text

A value that cannot be added is recorded as an ErrorRecord, its column is left
blank and the build continues with the next value.
"""

__all__ = [
    "build_rows",
    "format_number",
]


def format_number(value: numbers.Real) -> str:
    """Render a numeric value as a float literal ("3", "3.14")."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    f = float(value)
    if f.is_integer() and abs(f) < 1e15:
        return str(int(f))
    return repr(f)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _append_value(row: Row, column: str, value: Any, config: WriterConfig) -> None:
    if is_blank(value):
        if config.skip_blank_cells:
            ColumnCursor(row).advance()
        else:
            row.append_text("", config.inline_strings)
        return
    if _is_number(value):
        row.append_number(format_number(value))
    elif column in config.numeric_columns:
        row.append_number(str(value).strip())
    elif isinstance(value, (bool, np.bool_)):
        row.append_text("TRUE" if value else "FALSE", config.inline_strings)
    else:
        row.append_text(str(value), config.inline_strings)


def build_rows(
    df: pd.DataFrame,
    config: WriterConfig,
    *,
    source_name: str = "",
    sheet_name: str = "",
) -> SheetResult:
    """Build and serialize one row per DataFrame record.

    Args:
        df: Source table; its columns are the header
        config: Writer configuration
        source_name: Input file name recorded in rejections
        sheet_name: Sheet name recorded in rejections

    Returns:
        SheetResult with the <sheetData> fragment and build metrics
    """
    start = time.perf_counter()
    shared_strings = SharedStrings()
    writer = XmlWriter()
    rejected: list[ErrorRecord] = []
    columns = [str(c) for c in df.columns]
    row_number = config.start_row
    rows = 0
    cells = 0

    def reject(row: int, reference: str, err: RowBuildError) -> None:
        logger.debug("rejected row=%d ref=%s %s: %s", row, reference, err.error_type, err)
        rejected.append(
            ErrorRecord.create(source_name, sheet_name, row, reference, err.error_type, str(err))
        )

    writer.start_element("sheetData")
    total = len(df) + (1 if config.write_header else 0)
    with ProgressTracker(total, description=f"Building {sheet_name or source_name or 'rows'}") as progress:
        if config.write_header:
            header = Row(row_number)
            for name in columns:
                header.append_text(name, config.inline_strings)
            cells += len(header)
            serialize(header, writer, shared_strings)
            rows += 1
            row_number += 1
            progress.finish_row()

        for record in df.itertuples(index=False, name=None):
            row = Row(row_number)
            for column, value in zip(columns, record, strict=False):
                reference = f"{number_to_letters(row.column_cursor)}{row_number}"
                try:
                    _append_value(row, column, value, config)
                except RowBuildError as e:
                    reject(row_number, reference, e)
                    # keep later values in their own columns
                    ColumnCursor(row).advance()
            row_cells = len(row)
            try:
                serialize(row, writer, shared_strings)
            except RowBuildError as e:
                reject(row_number, "", e)
            else:
                cells += row_cells
                rows += 1
            row_number += 1
            progress.finish_row(rejected=len(rejected))
    writer.end_element()

    elapsed = time.perf_counter() - start
    return SheetResult(
        xml=writer.getvalue(),
        rows=rows,
        cells=cells,
        elapsed_seconds=elapsed,
        shared_strings=shared_strings,
        rejected=rejected,
    )
