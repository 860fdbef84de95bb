"""
Data model for the strategy generation workflow.

This module defines the records that flow between the validator, prompt
builder, response parser and controller, and the workflow state the
presentation layer renders from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, Tuple, Union

from marketeer.core.constants import MAX_CHARS, STRATEGY_FIELDS
from marketeer.core.error_handler import ShapeError, TransportError


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of checking a brief for submission.

    Attributes:
        eligible: Whether the brief may be submitted.
        trimmed_length: Length of the brief with surrounding whitespace removed.
        length: Raw length of the brief.
        reason: Why the brief is not eligible, None when it is.
        max_chars: Upper bound used for the character counter.
    """

    eligible: bool
    trimmed_length: int
    length: int = 0
    reason: Optional[str] = None
    max_chars: int = MAX_CHARS

    @property
    def counter(self) -> str:
        """Character counter text, e.g. '25 / 2000'."""
        return f"{self.length} / {self.max_chars}"


@dataclass(frozen=True)
class GenerationRequest:
    """
    A single instruction payload for the generation service.

    Attributes:
        brief: The brief embedded in the instruction.
        instruction: Full prompt text sent to the model.
        output_schema: JSON schema the response is expected to follow.
        field_names: JSON field names the response must contain.
    """

    brief: str
    instruction: str
    output_schema: Dict[str, Any] = field(default_factory=dict, compare=False)
    field_names: Tuple[str, ...] = STRATEGY_FIELDS


@dataclass(frozen=True)
class MarketingStrategy:
    """
    A validated three-part marketing strategy.
    """

    marketing_copy: str
    visual_strategy: str
    target_audience: str

    _ATTRIBUTES = {
        "marketingCopy": "marketing_copy",
        "visualStrategy": "visual_strategy",
        "targetAudience": "target_audience",
    }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "MarketingStrategy":
        """
        Build a strategy from its JSON form (camelCase keys).

        Args:
            data (Dict[str, str]): Decoded response with the three required fields

        Returns:
            MarketingStrategy: The strategy
        """
        return cls(
            marketing_copy=data["marketingCopy"],
            visual_strategy=data["visualStrategy"],
            target_audience=data["targetAudience"],
        )

    def to_dict(self) -> Dict[str, str]:
        """Return the strategy in its JSON form."""
        return {name: getattr(self, attr) for name, attr in self._ATTRIBUTES.items()}

    def section(self, name: str) -> str:
        """
        Get one section of the strategy.

        Args:
            name (str): Section name, either the JSON name ('marketingCopy') or the
                attribute name ('marketing_copy')

        Returns:
            str: The section text

        Raises:
            ValueError: If the section name is unknown
        """
        if name in self._ATTRIBUTES:
            return getattr(self, self._ATTRIBUTES[name])
        if name in self._ATTRIBUTES.values():
            return getattr(self, name)
        raise ValueError(f"Unknown strategy section: {name}")


class WorkflowStatus(Enum):
    """Phases of a generation attempt."""

    IDLE = "idle"
    GENERATING = "generating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


GenerationFailure = Union[TransportError, ShapeError]


@dataclass(frozen=True)
class WorkflowState:
    """
    Snapshot of the controller's workflow.

    Only SUCCEEDED states carry a strategy and only FAILED states carry an error.
    Use the constructors below instead of building states by hand.
    """

    status: WorkflowStatus
    strategy: Optional[MarketingStrategy] = None
    error: Optional[GenerationFailure] = None

    @classmethod
    def idle(cls) -> "WorkflowState":
        return cls(WorkflowStatus.IDLE)

    @classmethod
    def generating(cls) -> "WorkflowState":
        return cls(WorkflowStatus.GENERATING)

    @classmethod
    def succeeded(cls, strategy: MarketingStrategy) -> "WorkflowState":
        return cls(WorkflowStatus.SUCCEEDED, strategy=strategy)

    @classmethod
    def failed(cls, error: GenerationFailure) -> "WorkflowState":
        return cls(WorkflowStatus.FAILED, error=error)

    @property
    def is_generating(self) -> bool:
        return self.status is WorkflowStatus.GENERATING

    @property
    def reason(self) -> Optional[str]:
        """Human-readable failure reason, None unless the attempt failed."""
        if self.error is None:
            return None
        return self.error.message
