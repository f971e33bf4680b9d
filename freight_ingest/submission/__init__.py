"""Sequential shipment submission."""

from .submitter import ShipmentSubmitter, SubmissionNotAllowedError

__all__ = ["ShipmentSubmitter", "SubmissionNotAllowedError"]
