"""Domain models for the row writer.

Cell values, the shared string table, rejection records and sheet results.
"""

from .cell import Cell, CellKind
from .error_record import ErrorRecord
from .shared_strings import SharedStrings
from .sheet_result import SheetResult

__all__ = [
    # Cell models
    "Cell",
    "CellKind",
    "SharedStrings",
    # Processing models
    "ErrorRecord",
    "SheetResult",
]
