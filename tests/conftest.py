# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from sheetrow.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def clean_logging():
    # handlers bind sys.stdout at setup time; capsys swaps it per test
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_csv(temp_workdir: Path) -> Path:
    f = temp_workdir / "data" / "items.csv"
    f.write_text(
        "name,qty,price\n"
        "bolt,10,0.25\n"
        "nut,,0.1\n"
        "washer,5,\n",
        encoding="utf-8",
    )
    return f


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source: ./data/items.csv
start_row: 1
inline_strings: true
skip_blank_cells: true
numeric_columns: [qty, price]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "sheetrow.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
