"""Sequential shipment submission.

This module feeds validated shipments one at a time to a single-shipment
send function, tracking per-row progress. The send function itself is
supplied by the caller.
"""

import logging
import time
from typing import Callable, List, Optional, Sequence

from ..config import Config
from ..models.schema import ProgressStatus, Shipment

SendShipment = Callable[[Shipment, str, str], Shipment]
ProgressCallback = Callable[[List[Shipment]], None]


class SubmissionNotAllowedError(RuntimeError):
    """Raised when submission is requested for an empty or invalid batch."""


class ShipmentSubmitter:
    """
    Submits shipments strictly in order, with a fixed delay between rows.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        send: SendShipment,
        delay_seconds: float = Config.SUBMISSION_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the submitter.

        Args:
            api_key: Carbon-accounting API key
            base_url: Carbon-accounting API base URL
            send: Single-shipment call returning the updated shipment
            delay_seconds: Pause after each row (default: 0.1)
            sleep: Sleep function, replaceable in tests
        """
        self.api_key = api_key
        self.base_url = base_url
        self.send = send
        self.delay_seconds = delay_seconds
        self.sleep = sleep
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    def from_environment(cls, send: SendShipment, **kwargs) -> "ShipmentSubmitter":
        """
        Build a submitter with credentials read from the environment.

        Raises:
            ConfigurationError: If the API key or base URL is missing
        """
        api_key, base_url = Config.get_api_credentials()
        return cls(api_key, base_url, send, **kwargs)

    def submit(
        self,
        shipments: Sequence[Shipment],
        on_progress: Optional[ProgressCallback] = None
    ) -> List[Shipment]:
        """
        Submit shipments one by one.

        Args:
            shipments: Validated shipments (not modified)
            on_progress: Called with the shipments processed so far after each row

        Returns:
            Updated shipments in input order
        """
        self.logger.info(f"Submitting {len(shipments)} shipments to {self.base_url}")

        results: List[Shipment] = []
        failed = 0

        for shipment in shipments:
            pending = shipment.model_copy(
                update={'progress_status': ProgressStatus.PENDING}
            )

            try:
                updated = self.send(pending, self.api_key, self.base_url)
            except Exception as e:
                self.logger.error(
                    f"Failed to submit shipment {shipment.shipment_id}: {e}",
                    exc_info=True
                )
                updated = pending.model_copy(update={
                    'progress_status': ProgressStatus.ERROR,
                    'error_message': str(e),
                })
                failed += 1

            results.append(updated)

            if on_progress:
                on_progress(list(results))

            self.sleep(self.delay_seconds)

        self.logger.info(
            f"Submission complete: {len(results) - failed} submitted, {failed} failed"
        )
        return results
