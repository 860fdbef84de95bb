"""
Generation client for the OpenRouter.ai chat completions API.

Requests are made with ``requests`` on a worker thread, so awaiting
``generate`` never blocks the event loop.
"""

import os
import json
import asyncio
import datetime
from typing import Dict, Any, Optional

import requests

from marketeer.clients.base import GenerationClient
from marketeer.core.config import get_config_value
from marketeer.core.credentials import get_api_key
from marketeer.core.error_handler import TransportError, handle_generation_request, log_transport_error
from marketeer.core.logging_config import get_logger, redact_sensitive_data, truncate
from marketeer.core.constants import (
    DEFAULT_OPENROUTER_MODEL,
    OPENROUTER_API_ENDPOINT,
    DEFAULT_TEMPERATURE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TIMEOUT
)
from marketeer.strategy.models import GenerationRequest

# Initialize logger
logger = get_logger(__name__)

class OpenRouterGenerationClient(GenerationClient):
    """
    Client for making generation calls to OpenRouter.ai.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        log_file: Optional[str] = None
    ):
        """
        Initialize the OpenRouter client.

        Args:
            api_key (str, optional): OpenRouter API key. Read from OPENROUTER_API_KEY if not provided.
            model (str, optional): Model to use. Defaults to the configured generation model.
            temperature (float, optional): Sampling temperature.
            max_tokens (int, optional): Maximum tokens to generate.
            timeout (float, optional): Request timeout in seconds.
            log_file (str, optional): File that receives every request and response as JSON.
        """
        self.api_key = api_key or get_api_key("openrouter")

        self.model = model or get_config_value("generation.model", DEFAULT_OPENROUTER_MODEL)
        self.temperature = temperature if temperature is not None else get_config_value("generation.temperature", DEFAULT_TEMPERATURE)
        self.max_tokens = max_tokens or get_config_value("generation.max_tokens", DEFAULT_MAX_TOKENS)
        self.timeout = timeout or get_config_value("generation.timeout", DEFAULT_TIMEOUT)

        self.api_base = OPENROUTER_API_ENDPOINT
        self.endpoint = f"{self.api_base}/chat/completions"

        self.log_file = log_file
        if self.log_file:
            logger.info(f"Generation requests and responses will be logged to {self.log_file}")
            os.makedirs(os.path.dirname(os.path.abspath(self.log_file)), exist_ok=True)

        logger.info(f"Initialized {self.__class__.__name__} with model {self.model}")

    def build_payload(self, request: GenerationRequest, structured: bool = True) -> Dict[str, Any]:
        """
        Build the chat completions payload for a request.

        Args:
            request (GenerationRequest): The instruction payload
            structured (bool): Whether to ask for a JSON object response

        Returns:
            Dict[str, Any]: Request body
        """
        payload = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": request.instruction
                }
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens
        }
        if structured:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def generate(self, request: GenerationRequest, structured: bool = True) -> str:
        """
        Generate text for a request.

        Args:
            request (GenerationRequest): The instruction payload
            structured (bool): Whether to ask for a JSON object response

        Returns:
            str: Raw message content from the model

        Raises:
            TransportError: If the request fails or the response has no content
        """
        logger.info(f"Requesting strategy from {self.model} (structured={structured})")
        payload = self.build_payload(request, structured)
        return await asyncio.to_thread(self._complete, payload)

    def _complete(self, payload: Dict[str, Any]) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        logger.debug(f"Request headers: {json.dumps(redact_sensitive_data(headers))}")
        self._log_to_file({
            "timestamp": datetime.datetime.now().isoformat(),
            "type": "request",
            "model": self.model,
            "payload": payload
        })

        try:
            result = handle_generation_request(
                requests.post,
                self.endpoint,
                payload,
                headers,
                timeout=self.timeout,
                error_message="Error generating strategy"
            )
        except TransportError as e:
            log_transport_error(e)
            raise

        self._log_to_file({
            "timestamp": datetime.datetime.now().isoformat(),
            "type": "response",
            "response": result
        })

        content = self._extract_content(result)
        if content is None:
            error = TransportError(
                message="No valid content in response",
                response=result,
                endpoint=self.endpoint
            )
            log_transport_error(error)
            raise error

        logger.debug(f"Content: {truncate(content)}")
        return content

    @staticmethod
    def _extract_content(result: Dict[str, Any]) -> Optional[str]:
        """
        Pull the message text out of a chat completions response.

        Content may be a plain string or a list of typed parts; text parts are joined.
        """
        choices = result.get("choices") if isinstance(result, dict) else None
        if not choices:
            return None

        message = choices[0].get("message") or {}
        content = message.get("content")
        if isinstance(content, list):
            return "".join(
                item.get("text", "")
                for item in content
                if isinstance(item, dict) and item.get("type") == "text"
            )
        if isinstance(content, str):
            return content
        return None

    def get_service_info(self) -> Dict[str, Any]:
        return {
            "provider": "openrouter",
            "model": self.model,
            "endpoint": self.endpoint,
            "timeout": self.timeout
        }

    def _log_to_file(self, data: Dict[str, Any]) -> None:
        """
        Append data to the request log file, if one is configured.

        Args:
            data (Dict[str, Any]): Data to log
        """
        if not self.log_file:
            return

        try:
            with open(self.log_file, 'a') as f:
                f.write(json.dumps(data, indent=2))
                f.write("\n\n")
        except OSError as e:
            logger.error(f"Error writing to log file {self.log_file}: {str(e)}")
