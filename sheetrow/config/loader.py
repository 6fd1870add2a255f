from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Writer configuration loader.

Responsibilities:
- Load the YAML config (default: config/sheetrow.yml)
- Validate it against the bundled config_schema.json
- Apply defaults for optional keys
"""

__all__ = [
    "ConfigError",
    "WriterConfig",
    "load_config",
    "SCHEMA_PATH",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/sheetrow.yml")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class WriterConfig:
    source: str  # .xlsx / .csv input path
    sheet: str | None = None  # None -> first sheet
    start_row: int = 1  # worksheet row number of the first record
    inline_strings: bool = False
    skip_blank_cells: bool = True  # blank -> cursor advance, no cell
    write_header: bool = True  # column names go to start_row, records follow
    numeric_columns: frozenset[str] = field(default_factory=frozenset)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the data
            fails validation
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> WriterConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    return WriterConfig(
        source=data["source"],
        sheet=data.get("sheet"),
        start_row=data.get("start_row", 1),
        inline_strings=data.get("inline_strings", False),
        skip_blank_cells=data.get("skip_blank_cells", True),
        write_header=data.get("write_header", True),
        numeric_columns=frozenset(data.get("numeric_columns", [])),
    )
