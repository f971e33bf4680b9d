"""Freight shipment CSV ingestion, validation and submission."""

__version__ = "1.0.0"
