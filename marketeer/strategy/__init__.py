"""
Strategy generation workflow.

This module provides brief validation, prompt construction, response parsing
and the controller that runs generation attempts.
"""

from marketeer.strategy.models import (
    GenerationRequest,
    MarketingStrategy,
    ValidationResult,
    WorkflowState,
    WorkflowStatus
)
from marketeer.strategy.input_validator import InputValidator
from marketeer.strategy.prompt_builder import build_generation_request
from marketeer.strategy.response_parser import ParseResult, parse_strategy_response
from marketeer.strategy.controller import GenerationController
from marketeer.strategy.session import (
    StrategySession,
    Notifier,
    NotificationKind,
    Clipboard,
    LoggingNotifier
)
