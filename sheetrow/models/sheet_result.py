from __future__ import annotations

from dataclasses import dataclass, field

from .error_record import ErrorRecord
from .shared_strings import SharedStrings

"""Result model for building a sheetData fragment from a source table."""

__all__ = [
    "SheetResult",
]


@dataclass(frozen=True)
class SheetResult:
    """Output and metrics of one sheet build.

    The rows counter includes the header row when one is written.
    """
    xml: str  # <sheetData>...</sheetData>
    rows: int
    cells: int
    elapsed_seconds: float
    shared_strings: SharedStrings
    rejected: list[ErrorRecord] = field(default_factory=list)

    @property
    def rejected_cells(self) -> int:
        return len(self.rejected)

    @property
    def throughput_rows_per_sec(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.rows / self.elapsed_seconds
