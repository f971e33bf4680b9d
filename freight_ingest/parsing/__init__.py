"""CSV parsing."""

from .csv_parser import (
    CSVParser,
    CSVParseError,
    EmptyInputError,
    ColumnCountMismatchError,
    parse_csv,
    parse_csv_line,
)

__all__ = [
    "CSVParser",
    "CSVParseError",
    "EmptyInputError",
    "ColumnCountMismatchError",
    "parse_csv",
    "parse_csv_line",
]
