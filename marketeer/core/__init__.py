"""
Core utilities and configuration for the Marketeer package.
"""

from marketeer.core.config import get_config, get_config_value, set_config_value
from marketeer.core.credentials import get_api_key
from marketeer.core.logging_config import get_logger, configure_logging
from marketeer.core.error_handler import (
    ValidationError,
    TransportError,
    ShapeError,
    ShapeErrorKind,
    ConfigurationError
)
