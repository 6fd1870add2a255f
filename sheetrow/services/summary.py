from __future__ import annotations

from ..models.sheet_result import SheetResult

"""SUMMARY line rendering."""


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very small values
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: SheetResult) -> str:
    """Render the SUMMARY line for a sheet build.

    Format:
    SUMMARY rows={rows} cells={cells} rejected={rejected} shared_strings={unique}
    elapsed_sec={elapsed} throughput_rps={throughput}

    Examples:
        >>> from sheetrow.models.shared_strings import SharedStrings
        >>> result = SheetResult(xml="", rows=10, cells=30, elapsed_seconds=2.0,
        ...                      shared_strings=SharedStrings())
        >>> render_summary_line(result)
        'SUMMARY rows=10 cells=30 rejected=0 shared_strings=0 elapsed_sec=2 throughput_rps=5'
    """
    return (
        f"SUMMARY rows={result.rows} "
        f"cells={result.cells} "
        f"rejected={result.rejected_cells} "
        f"shared_strings={result.shared_strings.unique_count} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_rps={_format_number(result.throughput_rows_per_sec)}"
    )
