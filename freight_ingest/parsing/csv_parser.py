"""Minimal CSV parsing for shipment uploads.

This module turns raw comma-separated text into ordered raw records:
- Blank and whitespace-only lines are skipped
- The first remaining line is the header
- Double quotes toggle a quoted section in which commas are literal
- Quote characters are consumed; escaped quotes ("") are not supported
"""

import logging
from typing import List, Optional

from ..config import Config
from ..models.schema import RawRecord


class CSVParseError(ValueError):
    """Base class for structural CSV errors that abort a parse."""


class EmptyInputError(CSVParseError):
    """Raised when the input contains no non-blank lines."""

    def __init__(self):
        super().__init__("CSV data is empty.")


class ColumnCountMismatchError(CSVParseError):
    """Raised when a data row's field count differs from the header's."""

    def __init__(self, row_number: int, expected: int, actual: int):
        self.row_number = row_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_number} has a different number of columns than the header "
            f"(expected {expected}, got {actual})."
        )


def parse_csv_line(line: str) -> List[str]:
    """
    Split one line into trimmed fields.

    Args:
        line: A single line of CSV text

    Returns:
        List of field values
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append(''.join(current).strip())
    return fields


class CSVParser:
    """
    Parses uploaded CSV text into raw records.

    Row numbers in errors are 1-based over non-blank data lines,
    excluding the header.
    """

    def __init__(self, max_rows: int = Config.MAX_ROWS):
        """
        Initialize the parser.

        Args:
            max_rows: Maximum number of data rows to keep (default: 100)
        """
        self.max_rows = self._check_max_rows(max_rows)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @staticmethod
    def _check_max_rows(max_rows: int) -> int:
        if isinstance(max_rows, bool) or not isinstance(max_rows, int) or max_rows < 1:
            raise ValueError(f"max_rows must be a positive integer, got {max_rows!r}")
        return max_rows

    def parse(self, text: str, max_rows: Optional[int] = None) -> List[RawRecord]:
        """
        Parse CSV text.

        Args:
            text: Full file contents
            max_rows: Override for the configured row limit

        Returns:
            Raw records in file order, at most max_rows of them

        Raises:
            EmptyInputError: If there are no non-blank lines
            ColumnCountMismatchError: If a row's field count differs from the header's
        """
        limit = self.max_rows if max_rows is None else self._check_max_rows(max_rows)

        lines = [line for line in text.split('\n') if line.strip()]
        if not lines:
            raise EmptyInputError()

        headers = [header.strip() for header in lines[0].split(',')]
        data_lines = lines[1:]

        if len(data_lines) > limit:
            self.logger.debug(
                f"Truncating {len(data_lines) - limit} rows beyond limit of {limit}"
            )

        records: List[RawRecord] = []
        for row_number, line in enumerate(data_lines[:limit], start=1):
            values = parse_csv_line(line)

            if len(values) != len(headers):
                raise ColumnCountMismatchError(row_number, len(headers), len(values))

            record: RawRecord = {}
            for index, header in enumerate(headers):
                record[header] = values[index] if index < len(values) else ''

            self.logger.debug(f"Parsed row {row_number}: {record}")
            records.append(record)

        self.logger.info(f"Parsed {len(records)} rows with {len(headers)} columns")
        return records


def parse_csv(text: str, max_rows: int = Config.MAX_ROWS) -> List[RawRecord]:
    """Parse CSV text with a one-off parser."""
    return CSVParser(max_rows=max_rows).parse(text)
