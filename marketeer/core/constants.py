"""
Constants for the Marketeer package.

This module provides constants used throughout the Marketeer package.
These constants can be easily changed in one place.
"""

# Brief limits (measured in characters)
MIN_CHARS = 20
MAX_CHARS = 2000

# Generation providers
DEFAULT_PROVIDER = "openrouter"
SUPPORTED_PROVIDERS = ["openrouter", "openai"]

# LLM Models
DEFAULT_LLM_MODEL = "gpt-4o"
DEFAULT_OPENROUTER_MODEL = "openai/gpt-4o"

# API Endpoints
OPENROUTER_API_ENDPOINT = "https://openrouter.ai/api/v1"

# Default Values
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TIMEOUT = 60  # seconds

# Strategy sections, keyed by their JSON field names
STRATEGY_FIELDS = ("marketingCopy", "visualStrategy", "targetAudience")
SECTION_LABELS = {
    "marketingCopy": "Marketing copy",
    "visualStrategy": "Visual strategy",
    "targetAudience": "Target audience",
}

# User-facing messages
GENERATION_SUCCESS_MESSAGE = "Marketing strategy generated!"
GENERATION_FAILURE_MESSAGE = "Generation failed. Please try again."
