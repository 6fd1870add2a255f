from __future__ import annotations

from pathlib import Path

import pandas as pd

"""Source table reader.

The first line of the source is the header; every following line becomes one
record. Values are read as objects so numbers stay numbers and text stays
text; the builder decides how each value becomes a cell.
"""

__all__ = [
    "SourceError",
    "read_source",
    "is_blank",
]

SUPPORTED_SUFFIXES = (".xlsx", ".xlsm", ".csv")


class SourceError(Exception):
    """Raised when the source table cannot be read."""


def read_source(path: Path, sheet: str | None = None) -> pd.DataFrame:
    """Read a .xlsx/.csv file into a DataFrame.

    Parameters
    ----------
    path: source file path
    sheet: sheet name for Excel sources (None -> first sheet); ignored for CSV
    """
    if not path.exists():
        raise SourceError(f"source file not found: {path}")
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise SourceError(f"unsupported source type: {path.suffix}")
    if suffix == ".csv":
        # keep_default_na=False: the literal text "NA" stays text, empty fields become ""
        return pd.read_csv(path, dtype=object, keep_default_na=False)

    xls = pd.ExcelFile(path)
    if sheet is None:
        sheet_name: str | int = 0
    elif sheet in xls.sheet_names:
        sheet_name = sheet
    else:
        raise SourceError(f"sheet '{sheet}' not found in {path.name}")
    return xls.parse(sheet_name)


def is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # array-like values are never blank scalars
        return False
