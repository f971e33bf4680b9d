"""Shipment batch validation."""

from .validator import ShipmentValidator, is_id_unique

__all__ = ["ShipmentValidator", "is_id_unique"]
