"""Configuration settings for freight shipment ingestion.

This module centralizes configuration values and settings
for easy maintenance and extension.
"""

import os
from pathlib import Path
from typing import Tuple


class ConfigurationError(RuntimeError):
    """Raised when required external configuration is absent."""


class Config:
    """Application configuration."""

    # Application info
    APP_NAME = "Freight Shipment Processor"
    VERSION = "1.0.0"

    # Logging
    LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT = (
        '%(asctime)s - %(name)s - %(levelname)s - '
        '%(filename)s:%(lineno)d - %(message)s'
    )

    # Parsing
    MAX_ROWS = 100

    # Validation rules
    VALID_MODES = ("air", "sea", "road", "rail")
    VALIDATED_FIELDS = frozenset({"shipment_id", "mode", "weight_kg"})

    # Submission
    SUBMISSION_DELAY_SECONDS = 0.1
    API_KEY_ENV = "CLIMATIQ_API_KEY"
    API_BASE_URL_ENV = "CLIMATIQ_API_BASE_URL"

    # Output settings
    OUTPUT_DIR = Path("output")
    JSON_INDENT = 2

    @classmethod
    def get_output_dir(cls) -> Path:
        """Get output directory under the working directory, creating it if needed."""
        output_dir = Path.cwd() / cls.OUTPUT_DIR
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir

    @classmethod
    def get_api_credentials(cls) -> Tuple[str, str]:
        """
        Read the carbon-accounting API credentials from the environment.

        Returns:
            Tuple of (api_key, base_url)

        Raises:
            ConfigurationError: If either value is missing or empty
        """
        api_key = os.environ.get(cls.API_KEY_ENV)
        base_url = os.environ.get(cls.API_BASE_URL_ENV)

        if not api_key or not base_url:
            raise ConfigurationError(
                f"API credentials not found in environment variables "
                f"({cls.API_KEY_ENV}, {cls.API_BASE_URL_ENV})"
            )

        return api_key, base_url
