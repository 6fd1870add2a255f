from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..excel.reader import SourceError, read_source
from ..excel.serializer import shared_strings_to_xml
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary, set_debug, setup_logging
from ..services.sheet_builder import build_rows
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load config (YAML)
- Read the source table
- Build one <row> per record into a <sheetData> fragment
- Write the fragment (and optionally the shared string table)
- Flush rejected cells to the rejection log and print the SUMMARY line
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sheetrow", description="Tabular data -> SpreadsheetML <sheetData> writer")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="YAML config path")
    p.add_argument("--output", type=Path, help="Write <sheetData> here instead of stdout")
    p.add_argument("--shared-strings", type=Path, help="Write the <sst> shared string part here")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] must not fall back to sys.argv (pytest args)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    source = Path(cfg.source)
    logger.info(f"Reading source: {source}")
    try:
        df = read_source(source, cfg.sheet)
    except SourceError as e:
        logger.error(f"source: {e}")
        return EXIT_FATAL

    result = build_rows(df, cfg, source_name=source.name, sheet_name=cfg.sheet or "")

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(result.xml, encoding="utf-8")
        logger.info(f"sheetData written: {args.output}")
    else:
        sys.stdout.write(result.xml + "\n")
        sys.stdout.flush()

    if args.shared_strings is not None:
        args.shared_strings.parent.mkdir(parents=True, exist_ok=True)
        args.shared_strings.write_text(shared_strings_to_xml(result.shared_strings), encoding="utf-8")
        logger.info(f"shared strings written: {args.shared_strings}")

    if result.rejected:
        buf = ErrorLogBuffer()
        buf.extend(result.rejected)
        path = buf.flush()
        logger.warning(f"{result.rejected_cells} cells rejected, see {path}")

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line[len("SUMMARY "):])

    if result.rejected:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
