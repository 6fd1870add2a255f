from __future__ import annotations

from pathlib import Path

from sheetrow.cli.__main__ import main as cli_main

"""Exit code contract: 0 clean, 2 rejected cells, 1 fatal."""


def test_exit_code_fatal_missing_config(temp_workdir: Path, capsys):
    code = cli_main([])
    assert code == 1
    assert "ERROR config:" in capsys.readouterr().out


def test_exit_code_fatal_missing_source(temp_workdir: Path, write_config: Path, capsys):
    code = cli_main([])
    assert code == 1
    assert "ERROR source: source file not found" in capsys.readouterr().out


def test_exit_code_all_success(temp_workdir: Path, write_config: Path, sample_csv: Path, capsys):
    code = cli_main(["--output", "out/sheet.xml"])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY rows=4 cells=10 rejected=0" in out


def test_exit_code_partial_failure(temp_workdir: Path, write_config: Path, sample_csv: Path, capsys):
    sample_csv.write_text("name,qty\nbolt,ten\nnut,3\n", encoding="utf-8")
    code = cli_main(["--output", "out/sheet.xml"])
    out = capsys.readouterr().out
    assert code == 2
    assert "SUMMARY rows=3 cells=5 rejected=1" in out
