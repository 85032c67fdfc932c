"""
Configuration settings for the warehouse model layer.
Loads configuration from environment variables with sensible defaults.
"""

import logging
import os

from ...adapters.logger.standard_logger import StandardLogger, DEFAULT_LOG_FORMAT
from ..ports.exceptions import ConfigurationError
from ..ports.logger import Logger


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def _log_level(name: str, default: str) -> int:
    value = os.getenv(name, default).strip().upper()
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level '{value}' in {name}")
    return level


# Configuration from environment variables
class Config:
    """Model layer configuration loaded from environment variables."""

    LOGGER_NAME: str = "warehouse_models"

    # Logging configuration
    LOG_LEVEL: int = _log_level("WAREHOUSE_MODELS_LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = os.getenv("WAREHOUSE_MODELS_LOG_FORMAT", DEFAULT_LOG_FORMAT)

    # Decoding configuration - unknown keys are ignored unless strict decoding is on
    STRICT_DECODING: bool = _env_flag("WAREHOUSE_MODELS_STRICT_DECODING")


# Global configuration instance
config = Config()

# Configure logging using our custom logger
logger: Logger = StandardLogger(
    config.LOGGER_NAME,
    level=config.LOG_LEVEL,
    log_format=config.LOG_FORMAT
)
