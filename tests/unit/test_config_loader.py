from __future__ import annotations
import pytest
from pathlib import Path
from sheetrow.config.loader import ConfigError, WriterConfig, load_config


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.source == "./data/items.csv"
    assert cfg.start_row == 1
    assert cfg.inline_strings is True
    assert cfg.numeric_columns == frozenset({"qty", "price"})
    assert cfg.write_header is True


def test_load_config_defaults(write_config: Path):
    write_config.write_text("source: ./data/items.csv\n", encoding="utf-8")
    cfg = load_config(write_config)
    assert cfg == WriterConfig(source="./data/items.csv")
    assert cfg.skip_blank_cells is True
    assert cfg.sheet is None


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError) as e:
        load_config(temp_workdir / "config" / "not_exists.yml")
    assert "config file not found" in str(e.value)


def test_load_config_missing_required(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("source: ./data/items.csv\n", "")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value) and "required property" in str(e.value)


@pytest.mark.parametrize(
    "line",
    [
        "cursor_policy: overwrite",
        "reference_grammar: permissive",
        "start_row: 0",
        "inline_strings: maybe",
        "extra_field: not_allowed",
    ],
)
def test_load_config_invalid_values(write_config: Path, line: str):
    key = line.split(":", 1)[0]
    kept = [l for l in write_config.read_text(encoding="utf-8").splitlines() if not l.startswith(key + ":")]
    write_config.write_text("\n".join(kept + [line]) + "\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_invalid_yaml(write_config: Path):
    write_config.write_text("source: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "invalid yaml" in str(e.value)


def test_load_config_non_mapping_root(write_config: Path):
    write_config.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(write_config)
