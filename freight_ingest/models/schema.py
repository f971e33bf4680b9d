"""Pydantic models for freight shipment data.

This module defines the typed shipment entity derived from parsed CSV rows
and the report produced by a validation pass over a batch of shipments.
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field

# Untyped output of the CSV parser: column header -> cell text
RawRecord = Dict[str, str]


class TransportMode(str, Enum):
    """Transport modes accepted by the carbon-accounting API."""

    AIR = "air"
    SEA = "sea"
    ROAD = "road"
    RAIL = "rail"


class ProgressStatus(str, Enum):
    """Per-row submission progress."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


class Shipment(BaseModel):
    """
    Structured representation of a freight shipment row.

    Attributes:
        shipment_id: Identifier, expected to be unique across the batch
        origin_address: Free-form origin address
        destination_address: Free-form destination address
        mode: Transport mode text (checked against TransportMode by the validator)
        weight_kg: Weight cell text as uploaded, or a number set by an edit
        progress_status: Submission progress, managed by the submission stage
        error_message: Submission failure description (optional)
        results: Submission result payload (optional)
    """

    model_config = ConfigDict(validate_assignment=True)

    shipment_id: str = Field("", description="Shipment identifier")
    origin_address: str = Field("", description="Origin address")
    destination_address: str = Field("", description="Destination address")
    mode: str = Field("", description="Transport mode")
    weight_kg: Optional[Union[Decimal, str]] = Field(None, description="Weight in kg")
    progress_status: ProgressStatus = Field(
        ProgressStatus.PENDING, description="Submission progress"
    )
    error_message: Optional[str] = Field(None, description="Submission error")
    results: Optional[str] = Field(None, description="Submission results")


class ValidationReport(BaseModel):
    """
    Result of validating a batch of shipments.

    Attributes:
        messages: Human-readable errors, batch-level duplicate message first
        field_errors: 0-based row index -> names of fields in error for that row
    """

    messages: List[str] = Field(default_factory=list, description="Error messages")
    field_errors: Dict[int, Set[str]] = Field(
        default_factory=dict, description="Row index to errored field names"
    )

    @property
    def is_valid(self) -> bool:
        return not self.messages

    def has_field_error(self, row_index: int, field: str) -> bool:
        """Check whether a single cell should be highlighted."""
        return field in self.field_errors.get(row_index, ())

    def allows_submission(self, row_count: int) -> bool:
        """Submission needs at least one row and no validation messages."""
        return row_count > 0 and self.is_valid
