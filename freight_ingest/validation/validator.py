"""Shipment batch validation.

This module validates a complete batch of shipments against business rules
and reports errors both as messages and as a per-row index of errored fields.
The validator holds no state between calls; every call recomputes the full report.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

from ..config import Config
from ..models.schema import Shipment, ValidationReport

# Numeric literals accepted in weight text
DECIMAL_LITERAL = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity)")
PREFIXED_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def is_id_unique(ids: Iterable[str]) -> bool:
    """Return True if no id occurs more than once."""
    seen: Set[str] = set()
    for shipment_id in ids:
        if shipment_id in seen:
            return False
        seen.add(shipment_id)
    return True


class ShipmentValidator:
    """
    Validates shipment batches.

    Performs:
    - Duplicate shipment_id detection across the batch
    - Transport mode membership check
    - Non-negative numeric weight check
    """

    def __init__(self, valid_modes: Sequence[str] = Config.VALID_MODES):
        """
        Initialize the validator.

        Args:
            valid_modes: Accepted transport modes, in message order
        """
        self.valid_modes = tuple(valid_modes)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def validate(self, shipments: Sequence[Shipment]) -> ValidationReport:
        """
        Validate a full batch of shipments.

        Args:
            shipments: Every shipment currently in the batch, in row order

        Returns:
            ValidationReport with messages and the row -> field index
        """
        messages: List[str] = []
        field_errors: Dict[int, Set[str]] = {}

        duplicates = self.find_duplicate_ids(shipments)
        duplicate_set = set(duplicates)
        if duplicates:
            messages.append(f"Duplicate shipment IDs found: {', '.join(duplicates)}")

        for index, shipment in enumerate(shipments):
            row_num = index + 1
            row_errors: Set[str] = set()

            if shipment.shipment_id in duplicate_set:
                row_errors.add('shipment_id')

            if shipment.mode and shipment.mode not in self.valid_modes:
                row_errors.add('mode')
                messages.append(
                    f'Row {row_num}: Invalid mode "{shipment.mode}". '
                    f'Must be one of: {", ".join(self.valid_modes)}'
                )

            if shipment.weight_kg is not None:
                weight = self.coerce_weight(shipment.weight_kg)
                if weight is None or weight < 0:
                    row_errors.add('weight_kg')
                    messages.append(
                        f'Row {row_num}: Invalid weight "{shipment.weight_kg}". '
                        f'Must be a number >= 0.0'
                    )

            if row_errors:
                field_errors[index] = row_errors

        self.logger.info(
            f"Validation complete: rows={len(shipments)}, "
            f"errors={len(messages)}, rows_with_errors={len(field_errors)}"
        )

        return ValidationReport(messages=messages, field_errors=field_errors)

    @staticmethod
    def find_duplicate_ids(shipments: Sequence[Shipment]) -> List[str]:
        """
        Find ids shared by more than one shipment.

        Empty ids are ignored. Ids are returned in order of first occurrence.
        """
        ids = [shipment.shipment_id for shipment in shipments if shipment.shipment_id]
        if is_id_unique(ids):
            return []

        counts: Dict[str, int] = {}
        for shipment_id in ids:
            counts[shipment_id] = counts.get(shipment_id, 0) + 1

        return [shipment_id for shipment_id, count in counts.items() if count > 1]

    @staticmethod
    def coerce_weight(value: Any) -> Optional[Decimal]:
        """
        Coerce a weight value to a number.

        Text must be a plain numeric literal: decimal or exponent notation,
        unsigned 0x/0o/0b integers, or the exact spelling Infinity. Blank
        text counts as zero. Returns None when the value is not a number
        (including NaN).
        """
        if isinstance(value, bool):
            return None

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return Decimal(0)
            if DECIMAL_LITERAL.fullmatch(text):
                return Decimal(text)
            if PREFIXED_INTEGER.fullmatch(text):
                return Decimal(int(text, 0))
            return None

        try:
            weight = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            return None

        if weight.is_nan():
            return None
        return weight
