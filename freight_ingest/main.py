#!/usr/bin/env python3
"""
Main entry point for the Freight Shipment Processor.

This module hosts the ingestion pipeline: it loads CSV uploads, keeps the
current batch and its validation report, revalidates after cell edits, and
hands valid batches to the submission stage. It also provides a CLI.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from .config import Config
from .models.schema import Shipment, ValidationReport
from .normalization.normalizer import ShipmentNormalizer
from .parsing.csv_parser import CSVParser, CSVParseError
from .submission.submitter import (
    ProgressCallback,
    ShipmentSubmitter,
    SubmissionNotAllowedError,
)
from .utils.io_handler import IOHandler
from .utils.logger import setup_logger, set_log_level
from .validation.validator import ShipmentValidator

PARSE_ERROR_MESSAGE = "An error occurred while parsing the CSV file."
READ_ERROR_MESSAGE = "An error occurred while reading the CSV file."
INVALID_FILE_MESSAGE = "Please upload a valid CSV file."


class FreightProcessor:
    """
    Freight shipment pipeline coordinator.

    This class orchestrates the processing of one batch:
    1. CSV parsing into raw records
    2. Mapping raw records onto shipments
    3. Validation of the full batch
    4. Revalidation after edits to validated fields
    5. Sequential submission of a valid batch
    """

    def __init__(
        self,
        max_rows: int = Config.MAX_ROWS,
        log_level: str = Config.LOG_LEVEL,
        log_file: Optional[Path] = None
    ):
        """
        Initialize the processor with all components.

        Args:
            max_rows: Maximum number of data rows to load per upload
            log_level: Logging level
            log_file: Optional file that receives the log as well
        """
        self.logger = setup_logger(name="freight_ingest", log_file=log_file)
        set_log_level(self.logger, log_level)

        self.io_handler = IOHandler()
        self.parser = CSVParser(max_rows=max_rows)
        self.normalizer = ShipmentNormalizer()
        self.validator = ShipmentValidator()

        self.shipments: List[Shipment] = []
        self.report = ValidationReport()
        self.parsing_error: Optional[str] = None
        self.is_submitting = False

        self.logger.info(f"Initialized {Config.APP_NAME} v{Config.VERSION}")

    def load_text(self, text: str) -> bool:
        """
        Replace the current batch with the contents of an upload.

        Args:
            text: Raw CSV text

        Returns:
            True if the text was parsed, False on a parse failure
        """
        self.shipments = []
        self.report = ValidationReport()
        self.parsing_error = None

        try:
            records = self.parser.parse(text)
        except CSVParseError as e:
            self.logger.error(f"CSV parsing error: {e}")
            self.parsing_error = PARSE_ERROR_MESSAGE
            return False

        self.shipments = self.normalizer.normalize_all(records)
        self.report = self.validator.validate(self.shipments)
        return True

    def load_file(self, input_path: Path) -> bool:
        """
        Load an uploaded CSV file.

        Args:
            input_path: Path to the .csv file

        Returns:
            True if the file was read and parsed
        """
        self.logger.info(f"Processing file: {input_path}")

        if input_path.suffix.lower() != '.csv':
            self.logger.error(f"Rejected non-CSV upload: {input_path}")
            self.shipments = []
            self.report = ValidationReport()
            self.parsing_error = INVALID_FILE_MESSAGE
            return False

        try:
            text = self.io_handler.read_csv_text(input_path)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"File reading error for {input_path}: {e}")
            self.shipments = []
            self.report = ValidationReport()
            self.parsing_error = READ_ERROR_MESSAGE
            return False

        return self.load_text(text)

    def edit_cell(self, row_index: int, field: str, value: Any) -> ValidationReport:
        """
        Apply a single cell edit.

        The full batch is revalidated only when a validated field changes.

        Args:
            row_index: 0-based row index
            field: Shipment field name
            value: New cell value

        Returns:
            The current validation report

        Raises:
            IndexError: If the row does not exist
            ValueError: If the field is not a Shipment field
        """
        if not 0 <= row_index < len(self.shipments):
            raise IndexError(f"Row index {row_index} out of range")
        if field not in Shipment.model_fields:
            raise ValueError(f"Unknown shipment field: {field}")

        updated = self.shipments[row_index].model_copy()
        setattr(updated, field, value)

        shipments = list(self.shipments)
        shipments[row_index] = updated
        self.shipments = shipments

        if field in Config.VALIDATED_FIELDS:
            self.report = self.validator.validate(self.shipments)

        return self.report

    @property
    def can_submit(self) -> bool:
        return self.report.allows_submission(len(self.shipments)) and not self.is_submitting

    def submit(
        self,
        submitter: ShipmentSubmitter,
        on_progress: Optional[ProgressCallback] = None
    ) -> List[Shipment]:
        """
        Submit the current batch.

        Args:
            submitter: Configured shipment submitter
            on_progress: Optional per-row progress callback

        Returns:
            Updated shipments

        Raises:
            SubmissionNotAllowedError: If the batch is empty, invalid, or already submitting
        """
        if not self.can_submit:
            raise SubmissionNotAllowedError(
                "Submission requires at least one row and no validation errors"
            )

        self.is_submitting = True
        try:
            self.shipments = submitter.submit(self.shipments, on_progress)
        finally:
            self.is_submitting = False

        return self.shipments

    def save_results(self, output_format: str = "json", output_path: Optional[Path] = None):
        """
        Save the current batch and its validation report.

        Args:
            output_format: Output format ('json' or 'csv')
            output_path: Optional custom output path
        """
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Config.get_output_dir() / f"shipments_{timestamp}.{output_format}"

        rows = [shipment.model_dump() for shipment in self.shipments]

        if output_format == "csv":
            self.io_handler.write_csv(rows, output_path, fieldnames=list(Shipment.model_fields))
            report_path = output_path.with_name(f"{output_path.stem}_report.json")
            self.io_handler.save_report(self.report, report_path)
        else:
            self.io_handler.write_json(
                {
                    'processed_at': datetime.now().isoformat(),
                    'validation': self.io_handler.report_to_dict(self.report),
                    'shipments': rows,
                },
                output_path,
                indent=Config.JSON_INDENT
            )

        self.logger.info(f"Results saved to {output_path}")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Parse and validate a freight shipment CSV file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a file
  freight-ingest -i data/shipments.csv

  # Export rows and report as CSV
  freight-ingest -i data/shipments.csv -f csv -o output/shipments.csv

  # Load at most 20 rows with debug logging
  freight-ingest -i data/shipments.csv --max-rows 20 --log-level DEBUG --log-file run.log
        """
    )

    parser.add_argument(
        '-i', '--input',
        type=str,
        required=True,
        help='Input CSV file'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        help='Output file path (default: no export)'
    )

    parser.add_argument(
        '-f', '--format',
        choices=['json', 'csv'],
        default='json',
        help='Output format (default: json)'
    )

    parser.add_argument(
        '--max-rows',
        type=int,
        default=Config.MAX_ROWS,
        help=f'Maximum number of data rows (default: {Config.MAX_ROWS})'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Logging level (default: INFO)'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write the log to this file'
    )

    args = parser.parse_args(argv)

    if args.max_rows < 1:
        parser.error("--max-rows must be a positive integer")

    processor = FreightProcessor(
        max_rows=args.max_rows,
        log_level=args.log_level,
        log_file=Path(args.log_file) if args.log_file else None
    )

    if not processor.load_file(Path(args.input)):
        processor.logger.error(processor.parsing_error)
        sys.exit(1)

    for message in processor.report.messages:
        processor.logger.warning(message)

    if args.output:
        processor.save_results(args.format, Path(args.output))

    if processor.can_submit:
        processor.logger.info(f"{len(processor.shipments)} shipment(s) ready to submit")
        sys.exit(0)

    processor.logger.warning(
        f"Batch not ready to submit: {len(processor.report.messages)} validation error(s)"
    )
    sys.exit(1)


if __name__ == "__main__":
    main()
