from __future__ import annotations
import json
import re

from sheetrow.models.error_record import ErrorRecord

REQUIRED = ["timestamp", "source", "sheet", "row", "reference", "error_type", "message"]
ERROR_TYPE_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")
TS_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z$")


def test_error_record_json_line_schema():
    rec = ErrorRecord.create("items.csv", "Parts", 4, "B4", "NUMBER_PARSE_ERROR", "invalid float literal: 'x'")
    data = json.loads(rec.to_json_line())
    assert list(data.keys()) == REQUIRED
    assert isinstance(data["row"], int)
    assert ERROR_TYPE_RE.match(data["error_type"])
    assert TS_RE.match(data["timestamp"])


def test_error_type_labels_are_upper_snake():
    from sheetrow.excel import errors

    for name in errors.__all__:
        assert ERROR_TYPE_RE.match(getattr(errors, name).error_type), name


def test_non_ascii_message_kept_readable():
    rec = ErrorRecord.create("données.csv", "", 1, "A1", "INVALID_REFERENCE", "référence")
    assert "référence" in rec.to_json_line()
