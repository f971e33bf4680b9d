"""Raw record normalization.

This module maps untyped raw records produced by the CSV parser
onto typed Shipment models.
"""

import logging
from typing import Iterable, List, Optional

from ..models.schema import RawRecord, Shipment

STRING_FIELDS = ('shipment_id', 'origin_address', 'destination_address', 'mode')


class ShipmentNormalizer:
    """
    Converts raw CSV records into Shipment models.

    Handles:
    - Copying text columns verbatim (missing columns become empty strings)
    - Keeping weight text verbatim (empty text becomes None)
    - Ignoring columns the Shipment model does not know
    """

    def __init__(self):
        """Initialize the shipment normalizer."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def normalize(self, record: RawRecord) -> Shipment:
        """
        Map one raw record onto a Shipment.

        Args:
            record: Column header -> cell text

        Returns:
            Shipment with progress_status pending
        """
        fields = {name: record.get(name, '') for name in STRING_FIELDS}
        fields['weight_kg'] = self.normalize_weight(record.get('weight_kg'))

        unknown = set(record) - set(STRING_FIELDS) - {'weight_kg'}
        if unknown:
            self.logger.debug(f"Ignoring columns: {', '.join(sorted(unknown))}")

        return Shipment(**fields)

    def normalize_all(self, records: Iterable[RawRecord]) -> List[Shipment]:
        """Map raw records onto shipments, preserving order."""
        shipments = [self.normalize(record) for record in records]
        self.logger.info(f"Normalized {len(shipments)} shipments")
        return shipments

    def normalize_weight(self, weight_str: Optional[str]) -> Optional[str]:
        """
        Normalize weight text.

        The cell text is kept verbatim so error messages can quote it;
        the validator decides whether it is a number.

        Args:
            weight_str: Raw weight cell text

        Returns:
            The cell text, or None for empty text
        """
        if weight_str is None or not weight_str.strip():
            return None
        return weight_str
