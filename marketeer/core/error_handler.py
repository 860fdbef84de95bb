"""
Error handling module.

This module defines the exceptions raised or reported by the generation
workflow and the helpers that turn low-level HTTP failures into them.
"""

import json
import logging
from enum import Enum
from typing import Dict, Any, Optional, Callable, List

import requests

from marketeer.core.logging_config import redact_sensitive_data

logger = logging.getLogger(__name__)

class ValidationError(Exception):
    """
    Exception raised when a brief cannot be submitted.

    Attributes:
        message: Error message.
        field: Field that failed validation.
        value: Value that failed validation.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None
    ):
        self.message = message
        self.field = field
        self.value = value

        detailed_message = f"Validation Error: {message}"
        if field:
            detailed_message += f" (Field: {field})"

        super().__init__(detailed_message)


class TransportError(Exception):
    """
    Exception raised when the generation service cannot be reached or rejects a request.

    Attributes:
        message: Error message.
        status_code: HTTP status code.
        response: Raw response body.
        endpoint: API endpoint.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
        endpoint: Optional[str] = None,
        request_data: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.response = response
        self.endpoint = endpoint
        self.request_data = request_data

        detailed_message = f"Transport Error: {message}"
        if status_code:
            detailed_message += f" (Status Code: {status_code})"
        if endpoint:
            detailed_message += f" (Endpoint: {endpoint})"

        super().__init__(detailed_message)


class ShapeErrorKind(Enum):
    """Ways a model response can fail shape validation."""

    MALFORMED = "malformed"
    INCOMPLETE = "incomplete"


class ShapeError(Exception):
    """
    Error describing a model response that is not a usable marketing strategy.

    The response parser returns instances of this class rather than raising them.

    Attributes:
        message: Error message.
        kind: MALFORMED when the text is not a JSON object, INCOMPLETE when fields are missing or mistyped.
        missing_fields: Fields that were missing or had the wrong type.
    """

    def __init__(
        self,
        message: str,
        kind: ShapeErrorKind,
        missing_fields: Optional[List[str]] = None
    ):
        self.message = message
        self.kind = kind
        self.missing_fields = missing_fields or []

        detailed_message = f"Shape Error ({kind.value}): {message}"
        if self.missing_fields:
            detailed_message += f" (Fields: {', '.join(self.missing_fields)})"

        super().__init__(detailed_message)


class ConfigurationError(Exception):
    """
    Exception raised for configuration errors.

    Attributes:
        message: Error message.
        component: Component that has a configuration error.
        missing_keys: Keys that are missing from the configuration.
    """

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        missing_keys: Optional[list] = None
    ):
        self.message = message
        self.component = component
        self.missing_keys = missing_keys or []

        detailed_message = f"Configuration Error: {message}"
        if component:
            detailed_message += f" (Component: {component})"
        if missing_keys:
            detailed_message += f" (Missing Keys: {', '.join(missing_keys)})"

        super().__init__(detailed_message)


def handle_generation_request(
    request_func: Callable,
    endpoint: str,
    payload: Dict[str, Any],
    headers: Dict[str, str],
    timeout: Optional[float] = None,
    error_message: str = "Generation request failed"
) -> Dict[str, Any]:
    """
    Make a blocking API request and convert every failure into a TransportError.

    Args:
        request_func: Function to make the API request (e.g. requests.post).
        endpoint: API endpoint.
        payload: Request payload.
        headers: Request headers.
        timeout: Request timeout in seconds.
        error_message: Error message prefix used if the request fails.

    Returns:
        Decoded JSON response body.

    Raises:
        TransportError: If the request fails or the body is not JSON.
    """
    try:
        response = request_func(
            endpoint,
            json=payload,
            headers=headers,
            timeout=timeout
        )
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error: {e}")
        raise TransportError(
            message=f"{error_message}: Connection error",
            endpoint=endpoint,
            request_data=payload
        ) from e
    except requests.exceptions.Timeout as e:
        logger.error(f"Timeout error: {e}")
        raise TransportError(
            message=f"{error_message}: Request timed out",
            endpoint=endpoint,
            request_data=payload
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error: {e}")
        raise TransportError(
            message=f"{error_message}: {e}",
            endpoint=endpoint,
            request_data=payload
        ) from e

    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error: {e}")
        raise TransportError(
            message=f"{error_message}: {e}",
            status_code=response.status_code,
            response=response.text,
            endpoint=endpoint,
            request_data=payload
        ) from e

    try:
        return response.json()
    except (json.JSONDecodeError, ValueError) as e:
        logger.error(f"Failed to parse API response: {e}")
        raise TransportError(
            message=f"Failed to parse API response: {e}",
            status_code=response.status_code,
            response=response.text,
            endpoint=endpoint,
            request_data=payload
        ) from e


def validate_configuration(
    config: Dict[str, Any],
    required_keys: list,
    component: str = "Unknown"
) -> None:
    """
    Validate that required keys are present in the configuration.

    Args:
        config: Configuration to validate.
        required_keys: List of required key names.
        component: Component name for error reporting.

    Raises:
        ConfigurationError: If a required key is missing.
    """
    missing_keys = [key for key in required_keys if key not in config]

    if missing_keys:
        raise ConfigurationError(
            message="Missing required configuration keys",
            component=component,
            missing_keys=missing_keys
        )


def log_transport_error(error: TransportError) -> None:
    """
    Log a transport error with detailed information.

    Args:
        error: Transport error to log.
    """
    logger.error(f"Transport Error: {error.message}")

    if error.status_code:
        logger.error(f"Status Code: {error.status_code}")

    if error.endpoint:
        logger.error(f"Endpoint: {error.endpoint}")

    if error.response:
        logger.error(f"Response: {error.response}")

    if error.request_data:
        logger.error(f"Request Data: {redact_sensitive_data(error.request_data)}")
