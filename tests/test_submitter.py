"""Tests for shipment submission module."""

import pytest
from freight_ingest.config import ConfigurationError
from freight_ingest.models.schema import ProgressStatus, Shipment
from freight_ingest.submission.submitter import ShipmentSubmitter


def fake_send(shipment, api_key, base_url):
    return shipment.model_copy(update={
        "progress_status": ProgressStatus.SUCCESS,
        "results": f"{base_url}:{shipment.shipment_id}",
    })


class TestShipmentSubmitter:
    """Test suite for ShipmentSubmitter class."""

    @pytest.fixture
    def sleeps(self):
        return []

    @pytest.fixture
    def submitter(self, sleeps):
        """Fixture to provide a submitter that records sleeps instead of waiting."""
        return ShipmentSubmitter("key", "https://api.test", fake_send, sleep=sleeps.append)

    @pytest.fixture
    def shipments(self):
        return [
            Shipment(shipment_id="S1", mode="air", weight_kg="1"),
            Shipment(shipment_id="S2", mode="sea", weight_kg="2"),
            Shipment(shipment_id="S3", mode="rail", weight_kg="3"),
        ]

    def test_submit_in_order(self, submitter, shipments):
        results = submitter.submit(shipments)

        assert [r.shipment_id for r in results] == ["S1", "S2", "S3"]
        assert all(r.progress_status == ProgressStatus.SUCCESS for r in results)
        assert results[0].results == "https://api.test:S1"

    def test_send_receives_pending_copy_and_credentials(self, sleeps, shipments):
        calls = []

        def send(shipment, api_key, base_url):
            calls.append((shipment.progress_status, api_key, base_url))
            return shipment

        ShipmentSubmitter("key", "https://api.test", send, sleep=sleeps.append).submit(shipments)

        assert calls == [(ProgressStatus.PENDING, "key", "https://api.test")] * 3

    def test_progress_callback_after_each_row(self, submitter, shipments):
        snapshots = []

        submitter.submit(shipments, on_progress=lambda rows: snapshots.append(len(rows)))

        assert snapshots == [1, 2, 3]

    def test_delay_between_rows(self, submitter, sleeps, shipments):
        submitter.submit(shipments)

        assert sleeps == [0.1, 0.1, 0.1]

    def test_input_is_not_mutated(self, submitter, shipments):
        submitter.submit(shipments)

        assert all(s.progress_status == ProgressStatus.PENDING for s in shipments)
        assert all(s.results is None for s in shipments)

    def test_failed_send_marks_row_as_error(self, sleeps, shipments):
        def send(shipment, api_key, base_url):
            if shipment.shipment_id == "S2":
                raise RuntimeError("API unavailable")
            return fake_send(shipment, api_key, base_url)

        submitter = ShipmentSubmitter("key", "https://api.test", send, sleep=sleeps.append)
        results = submitter.submit(shipments)

        assert [r.progress_status for r in results] == [
            ProgressStatus.SUCCESS, ProgressStatus.ERROR, ProgressStatus.SUCCESS
        ]
        assert results[1].error_message == "API unavailable"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("CLIMATIQ_API_KEY", "env-key")
        monkeypatch.setenv("CLIMATIQ_API_BASE_URL", "https://env.test")

        submitter = ShipmentSubmitter.from_environment(fake_send)

        assert submitter.api_key == "env-key"
        assert submitter.base_url == "https://env.test"

    def test_from_environment_missing_credentials(self, monkeypatch):
        monkeypatch.delenv("CLIMATIQ_API_KEY", raising=False)
        monkeypatch.setenv("CLIMATIQ_API_BASE_URL", "https://env.test")

        with pytest.raises(ConfigurationError):
            ShipmentSubmitter.from_environment(fake_send)
