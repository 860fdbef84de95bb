"""
Logging configuration for the Marketeer package.

This module provides logging configuration for the Marketeer package:
- Configurable log levels
- Console and rotating file logging
- Redaction of sensitive values before they reach the logs
"""

import os
import sys
import logging
import logging.handlers
from typing import Dict, Any, Optional

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    log_to_console: bool = True,
    log_to_file: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configure global logging settings.

    Any argument left as None is read from the ``logging`` configuration section.

    Args:
        level (str, optional): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file (str, optional): Path to log file
        log_format (str, optional): Log message format
        log_to_console (bool): Whether to log to console
        log_to_file (bool): Whether to log to file (only when a log file is known)
        max_bytes (int): Maximum log file size before rotation
        backup_count (int): Number of backup log files to keep
    """
    from marketeer.core.config import get_config_value

    if level is None:
        level = get_config_value("logging.level", "INFO")

    if log_file is None:
        log_file = get_config_value("logging.file", None)

    if log_format is None:
        log_format = get_config_value("logging.format", DEFAULT_LOG_FORMAT)

    root_logger = logging.getLogger()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL
    }
    root_logger.setLevel(level_map.get(str(level).upper(), logging.INFO))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    if log_to_console:
        # Logs go to stderr so command output on stdout stays clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_to_file and log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)

def truncate(text: str, limit: int = 100) -> str:
    """
    Shorten text for debug logging.

    Args:
        text (str): Text to shorten
        limit (int): Maximum number of characters to keep

    Returns:
        str: The text, cut at ``limit`` characters with a trailing ellipsis if it was longer
    """
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."

def redact_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact sensitive information from data.

    Args:
        data (Dict[str, Any]): Data to redact

    Returns:
        Dict[str, Any]: Redacted copy of the data
    """
    redacted = data.copy()

    sensitive_keys = [
        "api_key", "key", "secret", "password", "token", "auth", "credential"
    ]

    for key, value in redacted.items():
        if any(sensitive_key in key.lower() for sensitive_key in sensitive_keys):
            redacted[key] = "********"
        elif isinstance(value, dict):
            redacted[key] = redact_sensitive_data(value)

    return redacted
