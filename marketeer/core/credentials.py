"""
Credential management for API keys.

API keys are read from environment variables. A ``.env`` file in the working
directory is loaded first, so keys can be kept out of the shell profile during
development.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from marketeer.core.error_handler import ConfigurationError
from marketeer.core.logging_config import get_logger

# Initialize logger
logger = get_logger(__name__)

# Load environment variables from .env file if it exists
load_dotenv()

# Map API names to environment variable names
API_KEY_ENV_VARS = {
    "openrouter": "OPENROUTER_API_KEY",
    "openai": "OPENAI_API_KEY",
}

def get_credential(key: str, required: bool = True) -> Optional[str]:
    """
    Get a credential from environment variables.

    Args:
        key (str): Environment variable name
        required (bool): Whether the credential is required

    Returns:
        Optional[str]: The credential value or None if not required and not found

    Raises:
        ConfigurationError: If the credential is required but not set
    """
    value = os.environ.get(key)

    if not value and required:
        logger.error(f"Required credential {key} is not set")
        raise ConfigurationError(
            message=f"{key} environment variable is required but not set",
            component="credentials",
            missing_keys=[key]
        )

    return value or None

def get_api_key(api_name: str) -> str:
    """
    Get API key for a specific API.

    Args:
        api_name (str): API name ('openrouter' or 'openai')

    Returns:
        str: API key

    Raises:
        ConfigurationError: If the API is unknown or its key is not set
    """
    env_var = API_KEY_ENV_VARS.get(api_name.lower())
    if not env_var:
        raise ConfigurationError(f"Unknown API: {api_name}", component="credentials")

    return get_credential(env_var)
