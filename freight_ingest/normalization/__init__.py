"""Raw record to Shipment mapping."""

from .normalizer import ShipmentNormalizer

__all__ = ["ShipmentNormalizer"]
