"""
Generation client for the OpenAI chat completions API, using the async SDK.
"""

from typing import Dict, Any, Optional

import openai
from openai import AsyncOpenAI

from marketeer.clients.base import GenerationClient
from marketeer.core.config import get_config_value
from marketeer.core.credentials import get_api_key
from marketeer.core.error_handler import TransportError, log_transport_error
from marketeer.core.logging_config import get_logger
from marketeer.core.constants import (
    DEFAULT_LLM_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TIMEOUT
)
from marketeer.strategy.models import GenerationRequest

# Initialize logger
logger = get_logger(__name__)

class OpenAIGenerationClient(GenerationClient):
    """
    Client for making generation calls to OpenAI.

    The model comes from generation.openai_model rather than generation.model,
    which holds an OpenRouter model id (e.g. openai/gpt-4o).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None
    ):
        """
        Initialize the OpenAI client.

        Args:
            api_key (str, optional): OpenAI API key. Read from OPENAI_API_KEY if not provided.
            model (str, optional): Model to use. Defaults to generation.openai_model.
            temperature (float, optional): Sampling temperature.
            max_tokens (int, optional): Maximum tokens to generate.
            timeout (float, optional): Request timeout in seconds.
            client (AsyncOpenAI, optional): Preconfigured SDK client.
        """
        self.model = model or get_config_value("generation.openai_model", DEFAULT_LLM_MODEL)
        self.temperature = temperature if temperature is not None else get_config_value("generation.temperature", DEFAULT_TEMPERATURE)
        self.max_tokens = max_tokens or get_config_value("generation.max_tokens", DEFAULT_MAX_TOKENS)
        self.timeout = timeout or get_config_value("generation.timeout", DEFAULT_TIMEOUT)

        if client is None:
            client = AsyncOpenAI(
                api_key=api_key or get_api_key("openai"),
                timeout=self.timeout,
                max_retries=0
            )
        self._client = client

        logger.info(f"Initialized {self.__class__.__name__} with model {self.model}")

    async def generate(self, request: GenerationRequest, structured: bool = True) -> str:
        """
        Generate text for a request.

        Args:
            request (GenerationRequest): The instruction payload
            structured (bool): Whether to ask for a JSON object response

        Returns:
            str: Raw message content from the model

        Raises:
            TransportError: If the API call fails or returns no content
        """
        options = {}
        if structured:
            options["response_format"] = {"type": "json_object"}

        logger.info(f"Requesting strategy from {self.model} (structured={structured})")
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": request.instruction}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                **options
            )
        except openai.APIStatusError as e:
            error = TransportError(
                message=f"Error generating strategy: {e.message}",
                status_code=e.status_code,
                response=e.response.text if e.response is not None else None,
                endpoint=str(self._client.base_url)
            )
            log_transport_error(error)
            raise error from e
        except openai.OpenAIError as e:
            error = TransportError(
                message=f"Error generating strategy: {e}",
                endpoint=str(self._client.base_url)
            )
            log_transport_error(error)
            raise error from e

        content = response.choices[0].message.content if response.choices else None
        if content is None:
            error = TransportError("No valid content in response", endpoint=str(self._client.base_url))
            log_transport_error(error)
            raise error

        return content

    def get_service_info(self) -> Dict[str, Any]:
        return {
            "provider": "openai",
            "model": self.model,
            "timeout": self.timeout
        }
