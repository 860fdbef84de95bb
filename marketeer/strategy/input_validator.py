"""
Input validation for product briefs.

A brief is eligible for submission when it has at least MIN_CHARS characters
once surrounding whitespace is removed, and no more than MAX_CHARS characters
in total. Lengths are counted in Unicode code points.
"""

from typing import Any

from marketeer.core.constants import MIN_CHARS, MAX_CHARS
from marketeer.core.logging_config import get_logger
from marketeer.strategy.models import ValidationResult

# Initialize logger
logger = get_logger(__name__)

class InputValidator:
    """
    Validates briefs before they are submitted for generation.
    """

    def __init__(self, min_chars: int = MIN_CHARS, max_chars: int = MAX_CHARS):
        """
        Initialize the validator.

        Args:
            min_chars (int): Minimum number of non-whitespace-padded characters
            max_chars (int): Maximum number of raw characters
        """
        self.min_chars = min_chars
        self.max_chars = max_chars

    def validate(self, brief: Any) -> ValidationResult:
        """
        Check whether a brief may be submitted.

        Never raises; anything that is not a string is reported as an empty,
        ineligible brief.

        Args:
            brief (str): The brief text

        Returns:
            ValidationResult: Eligibility, lengths and, when ineligible, the reason
        """
        if not isinstance(brief, str):
            logger.debug(f"Brief of type {type(brief).__name__} treated as empty")
            brief = ""

        length = len(brief)
        trimmed_length = len(brief.strip())

        reason = None
        if length > self.max_chars:
            reason = f"Maximum {self.max_chars} characters exceeded"
        elif trimmed_length < self.min_chars:
            reason = f"Minimum {self.min_chars} characters required"

        return ValidationResult(
            eligible=reason is None,
            trimmed_length=trimmed_length,
            length=length,
            reason=reason,
            max_chars=self.max_chars
        )
