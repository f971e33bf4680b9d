"""Data models for freight shipment ingestion."""

from .schema import (
    RawRecord,
    TransportMode,
    ProgressStatus,
    Shipment,
    ValidationReport,
)

__all__ = [
    "RawRecord",
    "TransportMode",
    "ProgressStatus",
    "Shipment",
    "ValidationReport",
]
