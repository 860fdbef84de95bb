"""
Marketeer - AI-powered marketing strategy assistant

Turns a short product or service description into a three-part marketing
strategy: persuasive marketing copy, a visual strategy and a target-audience
analysis, generated by a language model.
"""

__version__ = "0.1.0"

# Import main components for easier access
from marketeer.strategy.input_validator import InputValidator
from marketeer.strategy.controller import GenerationController
from marketeer.strategy.session import StrategySession
from marketeer.strategy.models import MarketingStrategy, WorkflowState, WorkflowStatus
from marketeer.clients import create_generation_client
