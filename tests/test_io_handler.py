"""Tests for I/O handling utilities."""

import json
import pytest
from freight_ingest.models.schema import ValidationReport
from freight_ingest.utils.io_handler import IOHandler


class TestIOHandler:
    """Test suite for IOHandler class."""

    @pytest.fixture
    def io_handler(self):
        """Fixture to provide IOHandler instance."""
        return IOHandler()

    def test_read_csv_text_strips_bom(self, io_handler, tmp_path):
        path = tmp_path / "data.csv"
        path.write_bytes("\ufeffshipment_id\nS1\n".encode("utf-8"))

        assert io_handler.read_csv_text(path) == "shipment_id\nS1\n"

    def test_read_csv_text_missing_file(self, io_handler, tmp_path):
        with pytest.raises(FileNotFoundError):
            io_handler.read_csv_text(tmp_path / "missing.csv")

    def test_read_csv_text_wrong_suffix(self, io_handler, tmp_path):
        path = tmp_path / "data.xlsx"
        path.write_text("a\n1\n", encoding="utf-8")

        with pytest.raises(ValueError):
            io_handler.read_csv_text(path)

    def test_save_report(self, io_handler, tmp_path):
        report = ValidationReport(
            messages=["Duplicate shipment IDs found: S1"],
            field_errors={2: {"shipment_id"}, 0: {"weight_kg", "shipment_id"}},
        )
        path = tmp_path / "report.json"

        io_handler.save_report(report, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {
            "is_valid": False,
            "messages": ["Duplicate shipment IDs found: S1"],
            "field_errors": {"0": ["shipment_id", "weight_kg"], "2": ["shipment_id"]},
        }

    def test_write_csv_empty(self, io_handler, tmp_path):
        path = tmp_path / "empty.csv"

        io_handler.write_csv([], path)

        assert not path.exists()
