"""Tests for shipment normalization module."""

import pytest
from freight_ingest.models.schema import ProgressStatus
from freight_ingest.normalization.normalizer import ShipmentNormalizer


class TestShipmentNormalizer:
    """Test suite for ShipmentNormalizer class."""

    @pytest.fixture
    def normalizer(self):
        """Fixture to provide ShipmentNormalizer instance."""
        return ShipmentNormalizer()

    def test_normalize_complete_record(self, normalizer):
        record = {
            "shipment_id": "S1",
            "origin_address": "Berlin",
            "destination_address": "Paris",
            "mode": "road",
            "weight_kg": "120.5",
        }

        shipment = normalizer.normalize(record)

        assert shipment.shipment_id == "S1"
        assert shipment.origin_address == "Berlin"
        assert shipment.destination_address == "Paris"
        assert shipment.mode == "road"
        assert shipment.weight_kg == "120.5"
        assert shipment.progress_status == ProgressStatus.PENDING
        assert shipment.error_message is None
        assert shipment.results is None

    def test_missing_columns_default_to_empty(self, normalizer):
        shipment = normalizer.normalize({"shipment_id": "S1"})

        assert shipment.mode == ""
        assert shipment.origin_address == ""
        assert shipment.weight_kg is None

    def test_unknown_columns_are_ignored(self, normalizer):
        shipment = normalizer.normalize({"shipment_id": "S1", "carrier": "DHL"})

        assert not hasattr(shipment, "carrier")

    def test_progress_status_not_taken_from_file(self, normalizer):
        shipment = normalizer.normalize({"shipment_id": "S1", "progress_status": "success"})

        assert shipment.progress_status == ProgressStatus.PENDING

    def test_invalid_mode_is_preserved(self, normalizer):
        assert normalizer.normalize({"mode": "truck"}).mode == "truck"

    @pytest.mark.parametrize("raw", [
        "12480", " 7.5 ", "-5", "0", "1e3", "-.5", "-007", "abc", "12kg", "NaN", "1_000",
    ])
    def test_weight_text_kept_verbatim(self, normalizer, raw):
        assert normalizer.normalize_weight(raw) == raw

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_weight(self, normalizer, raw):
        assert normalizer.normalize_weight(raw) is None

    def test_normalize_all_preserves_order(self, normalizer):
        records = [{"shipment_id": "S2"}, {"shipment_id": "S1"}, {"shipment_id": "S3"}]

        shipments = normalizer.normalize_all(records)

        assert [s.shipment_id for s in shipments] == ["S2", "S1", "S3"]
