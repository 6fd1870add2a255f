from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display with tqdm (TTY only).

In non-TTY environments (CI, redirected output) no progress bar is created so
the output stream stays free of control sequences.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Row progress tracker for a sheet build."""

    def __init__(self, total_rows: int, *, description: str = "Building rows") -> None:
        """Initialize progress tracker.

        Args:
            total_rows: Total number of rows to build
            description: Description for the progress bar
        """
        self.total_rows = total_rows
        self.description = description
        self.current_row = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
                file=sys.stderr,
            )
        else:
            self.pbar = None

    def finish_row(self, rejected: int = 0) -> None:
        """Mark one row as built.

        Args:
            rejected: Number of cells rejected so far, shown as postfix
        """
        self.current_row += 1
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            if rejected:
                self.pbar.set_postfix(rejected=rejected)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
