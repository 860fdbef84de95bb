"""
Generation workflow controller.

The controller owns the workflow state of one user session and runs
generation attempts:

    IDLE -> GENERATING -> SUCCEEDED | FAILED -> (reset) IDLE

A new attempt may start from any state except GENERATING. Every accepted
submit increments the generation token; an attempt whose token is no longer
current when the generation service answers is discarded, so a late answer
can never overwrite the state of a newer attempt or of a reset.
"""

import asyncio
from typing import Optional, TYPE_CHECKING

from marketeer.core.error_handler import ValidationError, TransportError
from marketeer.core.logging_config import get_logger, truncate
from marketeer.strategy.input_validator import InputValidator
from marketeer.strategy.models import ValidationResult, WorkflowState, WorkflowStatus
from marketeer.strategy.prompt_builder import build_generation_request
from marketeer.strategy.response_parser import parse_strategy_response

if TYPE_CHECKING:
    from marketeer.clients.base import GenerationClient

# Initialize logger
logger = get_logger(__name__)

class GenerationController:
    """
    Runs strategy generation attempts and holds their outcome.
    """

    def __init__(
        self,
        client: "GenerationClient",
        validator: Optional[InputValidator] = None,
        structured: bool = True
    ):
        """
        Initialize the controller.

        Args:
            client (GenerationClient): Service that turns a request into raw text
            validator (InputValidator, optional): Brief validator. Defaults to the standard limits.
            structured (bool): Whether to ask the service for JSON output
        """
        self.client = client
        self.validator = validator or InputValidator()
        self.structured = structured

        self._state = WorkflowState.idle()
        self._brief = ""
        self._token = 0

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def brief(self) -> str:
        return self._brief

    @property
    def generation_token(self) -> int:
        return self._token

    def edit(self, brief: str) -> ValidationResult:
        """
        Replace the current brief.

        Args:
            brief (str): New brief text

        Returns:
            ValidationResult: Whether the new brief can be submitted
        """
        self._brief = brief
        return self.validator.validate(brief)

    async def submit(self, brief: Optional[str] = None) -> WorkflowState:
        """
        Run one generation attempt.

        Args:
            brief (str, optional): Brief to submit. Defaults to the current brief.

        Returns:
            WorkflowState: The state after the attempt. If the attempt was
                superseded while waiting, this is the newer state, not its own outcome.

        Raises:
            ValidationError: If an attempt is already running or the brief is not
                eligible. The state is left unchanged.
        """
        if self._state.is_generating:
            logger.warning("Rejected submit: a generation attempt is already in progress")
            raise ValidationError("A generation attempt is already in progress", field="state")

        if brief is None:
            brief = self._brief

        result = self.validator.validate(brief)
        if not result.eligible:
            logger.info(f"Rejected submit: {result.reason} ({result.counter})")
            raise ValidationError(result.reason, field="brief", value=brief)

        self._brief = brief
        self._token += 1
        token = self._token
        self._state = WorkflowState.generating()
        logger.info(f"Generation {token} started")
        logger.debug(f"Brief for generation {token}: {truncate(brief)}")

        request = build_generation_request(brief)

        try:
            raw = await self.client.generate(request, structured=self.structured)
        except TransportError as e:
            outcome = WorkflowState.failed(e)
        except asyncio.CancelledError:
            if token == self._token:
                logger.warning(f"Generation {token} was cancelled")
                self._state = WorkflowState.failed(TransportError("Generation was cancelled"))
            raise
        except Exception as e:
            error = TransportError(f"Generation service failed: {e}")
            error.__cause__ = e
            outcome = WorkflowState.failed(error)
        else:
            parsed = parse_strategy_response(raw)
            if parsed.ok:
                outcome = WorkflowState.succeeded(parsed.strategy)
            else:
                outcome = WorkflowState.failed(parsed.error)

        if token != self._token:
            logger.info(
                f"Discarding outcome of generation {token} ({outcome.status.value}); "
                f"current generation is {self._token}"
            )
            return self._state

        self._state = outcome
        if outcome.status is WorkflowStatus.SUCCEEDED:
            logger.info(f"Generation {token} succeeded")
        else:
            logger.error(f"Generation {token} failed: {outcome.error}")
        return outcome

    def reset(self) -> None:
        """
        Return to IDLE, discarding the brief, strategy and error.

        A reset during GENERATING also invalidates the running attempt, whose
        answer will be ignored when it arrives.
        """
        if self._state.is_generating:
            self._token += 1
            logger.info("Reset during generation; the running attempt will be ignored")

        if self._state.status is not WorkflowStatus.IDLE:
            logger.info("Workflow reset to idle")

        self._state = WorkflowState.idle()
        self._brief = ""
