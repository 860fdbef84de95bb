"""
Base interface for text generation services.

The workflow controller depends only on this interface, so providers can be
swapped without touching the core.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

from marketeer.strategy.models import GenerationRequest

class GenerationClient(ABC):
    """
    Base interface for text generation services.
    """

    @abstractmethod
    async def generate(self, request: GenerationRequest, structured: bool = True) -> str:
        """
        Send a generation request and return the model's raw text.

        Args:
            request (GenerationRequest): The instruction payload
            structured (bool): Ask the model for JSON output. This biases the model
                but does not guarantee the response shape.

        Returns:
            str: Raw text produced by the model

        Raises:
            TransportError: If the service cannot be reached or rejects the request
        """
        pass

    @abstractmethod
    def get_service_info(self) -> Dict[str, Any]:
        """
        Get information about the generation service.

        Returns:
            Dict[str, Any]: Service information such as provider and model
        """
        pass
