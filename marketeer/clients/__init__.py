"""
Clients for text generation services.

This module provides the GenerationClient interface, its provider
implementations and a factory that picks one from configuration.
"""

from typing import Optional

from marketeer.clients.base import GenerationClient
from marketeer.clients.openrouter import OpenRouterGenerationClient
from marketeer.clients.openai_client import OpenAIGenerationClient
from marketeer.core.config import get_config_value
from marketeer.core.error_handler import ConfigurationError, validate_configuration

_PROVIDERS = {
    "openrouter": OpenRouterGenerationClient,
    "openai": OpenAIGenerationClient,
}

def create_generation_client(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    **kwargs
) -> GenerationClient:
    """
    Create a generation client.

    Args:
        provider (str, optional): 'openrouter' or 'openai'. Defaults to generation.provider.
        model (str, optional): Model name passed to the client.
        **kwargs: Extra keyword arguments for the client constructor.

    Returns:
        GenerationClient: The client

    Raises:
        ConfigurationError: If no provider is configured or the provider is unknown
    """
    if provider is None:
        section = get_config_value("generation", {})
        validate_configuration(section, ["provider"], component="generation")
        provider = section["provider"]

    client_class = _PROVIDERS.get(str(provider).lower())
    if client_class is None:
        raise ConfigurationError(
            f"Unknown generation provider: {provider}. Supported providers: {', '.join(_PROVIDERS)}",
            component="generation"
        )

    return client_class(model=model, **kwargs)
