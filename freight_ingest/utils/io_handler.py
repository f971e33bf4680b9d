"""Input/Output handling utilities.

This module handles file I/O operations including:
- Reading uploaded CSV files as text
- Writing shipments and validation reports to JSON and CSV
"""

import csv
import json
import logging
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.schema import ValidationReport


class IOHandler:
    """
    Handles all file I/O operations for the processor.
    """

    def __init__(self):
        """Initialize IO handler."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def read_csv_text(self, file_path: Path) -> str:
        """
        Read an uploaded CSV file.

        Args:
            file_path: Path to CSV file

        Returns:
            File contents, without a leading byte-order mark

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file is not a .csv file
        """
        if file_path.suffix.lower() != '.csv':
            raise ValueError(f"Not a CSV file: {file_path}")
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8-sig') as f:
            text = f.read()

        self.logger.info(f"Loaded {len(text)} characters from {file_path}")
        return text

    def write_json(
        self,
        data: Any,
        output_path: Path,
        indent: int = 2
    ):
        """
        Write data to JSON file.

        Args:
            data: JSON-compatible data (Decimal and Enum values allowed)
            output_path: Output file path
            indent: JSON indentation (default: 2)
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        class CustomEncoder(json.JSONEncoder):
            def default(self, obj):
                if isinstance(obj, Decimal):
                    return float(obj)
                if isinstance(obj, Enum):
                    return obj.value
                if isinstance(obj, set):
                    return sorted(obj)
                return super().default(obj)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=indent, cls=CustomEncoder)

        self.logger.info(f"Wrote JSON to {output_path}")

    def write_csv(
        self,
        data: List[Dict[str, Any]],
        output_path: Path,
        fieldnames: Optional[List[str]] = None
    ):
        """
        Write data to CSV file.

        Args:
            data: List of dictionaries to write
            output_path: Output file path
            fieldnames: List of field names (if None, inferred from first record)
        """
        if not data:
            self.logger.warning("No data to write to CSV")
            return

        output_path.parent.mkdir(parents=True, exist_ok=True)

        if fieldnames is None:
            fieldnames = list(data[0].keys())

        def convert_value(val):
            if isinstance(val, Enum):
                return val.value
            if val is None:
                return ''
            return str(val)

        csv_data = [{k: convert_value(v) for k, v in record.items()} for record in data]

        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(csv_data)

        self.logger.info(f"Wrote {len(data)} records to {output_path}")

    def save_report(self, report: ValidationReport, output_path: Path):
        """
        Save a validation report to JSON.

        Args:
            report: Validation report
            output_path: Output file path
        """
        self.write_json(self.report_to_dict(report), output_path)
        self.logger.info(f"Saved validation report to {output_path}")

    @staticmethod
    def report_to_dict(report: ValidationReport) -> Dict[str, Any]:
        """Convert a report to plain data with row keys as strings and sorted fields."""
        return {
            'is_valid': report.is_valid,
            'messages': list(report.messages),
            'field_errors': {
                str(row): sorted(fields)
                for row, fields in sorted(report.field_errors.items())
            },
        }
