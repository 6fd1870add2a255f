from __future__ import annotations

"""Exceptions raised while building and serializing worksheet rows.

Every failure is raised to the immediate caller and is recoverable: a failed
operation leaves the row exactly as it was before the call.
"""

__all__ = [
    "RowBuildError",
    "InvalidReference",
    "DuplicateReference",
    "RowMismatch",
    "MissingReference",
    "NumberParseError",
    "RowConsumedError",
    "CellSerializationError",
]


class RowBuildError(Exception):
    """Base exception for row construction errors."""

    # UPPER_SNAKE label used in the rejection log
    error_type = "ROW_BUILD_ERROR"


class InvalidReference(RowBuildError):
    """Raised when a cell reference is malformed or its letters fail decoding."""

    error_type = "INVALID_REFERENCE"


class DuplicateReference(RowBuildError):
    """Raised when an explicit insertion reuses a reference already in the row."""

    error_type = "DUPLICATE_REFERENCE"


class RowMismatch(RowBuildError):
    """Raised when a reference's row component differs from the row number."""

    error_type = "ROW_MISMATCH"


class MissingReference(RowBuildError):
    """Raised when a cell without a reference is inserted explicitly."""

    error_type = "MISSING_REFERENCE"


class NumberParseError(RowBuildError, ValueError):
    """Raised when numeric cell text is not a floating-point literal."""

    error_type = "NUMBER_PARSE_ERROR"


class RowConsumedError(RowBuildError):
    """Raised when a row is used after it has been serialized."""

    error_type = "ROW_CONSUMED"


class CellSerializationError(RowBuildError):
    """Raised when a cell cannot be rendered as markup."""

    error_type = "CELL_SERIALIZATION_ERROR"
