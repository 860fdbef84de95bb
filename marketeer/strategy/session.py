"""
User session around the generation controller.

A session exclusively owns one GenerationController and connects it to the
presentation boundaries: a Notifier that shows success and error messages,
and an optional Clipboard for copying strategy sections.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TYPE_CHECKING

from marketeer.core.constants import (
    SECTION_LABELS,
    GENERATION_SUCCESS_MESSAGE,
    GENERATION_FAILURE_MESSAGE
)
from marketeer.core.error_handler import ValidationError
from marketeer.core.logging_config import get_logger
from marketeer.strategy.controller import GenerationController
from marketeer.strategy.input_validator import InputValidator
from marketeer.strategy.models import ValidationResult, WorkflowState, WorkflowStatus

if TYPE_CHECKING:
    from marketeer.clients.base import GenerationClient

# Initialize logger
logger = get_logger(__name__)


class NotificationKind(Enum):
    """Kind of a user notification, which decides how it is shown."""

    SUCCESS = "success"
    ERROR = "error"


class Notifier(ABC):
    """
    Shows short status messages to the user.
    """

    @abstractmethod
    def notify(self, kind: NotificationKind, message: str) -> None:
        """
        Show a message to the user.

        Args:
            kind (NotificationKind): Whether the message reports success or an error
            message (str): Text to show
        """
        pass


class Clipboard(ABC):
    """
    Copies text to the user's clipboard.
    """

    @abstractmethod
    def copy(self, text: str) -> None:
        """
        Copy text to the clipboard.

        Raises:
            Exception: If the text could not be copied
        """
        pass


class LoggingNotifier(Notifier):
    """Notifier that writes messages to the log."""

    def notify(self, kind: NotificationKind, message: str) -> None:
        if kind is NotificationKind.ERROR:
            logger.error(message)
        else:
            logger.info(message)


class StrategySession:
    """
    One user's strategy session.
    """

    def __init__(
        self,
        client: "GenerationClient",
        notifier: Optional[Notifier] = None,
        clipboard: Optional[Clipboard] = None,
        validator: Optional[InputValidator] = None
    ):
        """
        Initialize the session.

        Args:
            client (GenerationClient): Generation service for the session's controller
            notifier (Notifier, optional): Where status messages go. Defaults to the log.
            clipboard (Clipboard, optional): Clipboard used by copy_section
            validator (InputValidator, optional): Brief validator for the controller
        """
        self.controller = GenerationController(client, validator=validator)
        self.notifier = notifier or LoggingNotifier()
        self.clipboard = clipboard

    @property
    def state(self) -> WorkflowState:
        return self.controller.state

    def edit(self, brief: str) -> ValidationResult:
        return self.controller.edit(brief)

    async def generate(self, brief: Optional[str] = None) -> WorkflowState:
        """
        Generate a strategy and notify the user of the outcome.

        Args:
            brief (str, optional): Brief to submit. Defaults to the current brief.

        Returns:
            WorkflowState: The state after the attempt

        Raises:
            ValidationError: If the brief cannot be submitted (after notifying the user)
        """
        try:
            state = await self.controller.submit(brief)
        except ValidationError as e:
            self.notifier.notify(NotificationKind.ERROR, e.message)
            raise

        if state.status is WorkflowStatus.SUCCEEDED:
            self.notifier.notify(NotificationKind.SUCCESS, GENERATION_SUCCESS_MESSAGE)
        elif state.status is WorkflowStatus.FAILED:
            self.notifier.notify(NotificationKind.ERROR, GENERATION_FAILURE_MESSAGE)
        return state

    def copy_section(self, section: str) -> str:
        """
        Copy one section of the current strategy to the clipboard.

        Args:
            section (str): Section name, e.g. 'marketingCopy' or 'marketing_copy'

        Returns:
            str: The copied text

        Raises:
            ValidationError: If there is no strategy to copy from
            ValueError: If the section name is unknown

        Clipboard failures are reported through the notifier, not raised.
        """
        strategy = self.state.strategy
        if strategy is None:
            raise ValidationError("No marketing strategy to copy from", field="section", value=section)

        text = strategy.section(section)
        label = SECTION_LABELS[_wire_name(section)]

        if self.clipboard is None:
            self.notifier.notify(NotificationKind.ERROR, "Clipboard is not available")
            return text

        try:
            self.clipboard.copy(text)
        except Exception as e:
            logger.error(f"Failed to copy {label.lower()} to clipboard: {e}")
            self.notifier.notify(NotificationKind.ERROR, f"Could not copy {label.lower()} to clipboard")
            return text

        self.notifier.notify(NotificationKind.SUCCESS, f"{label} copied to clipboard!")
        return text

    def reset(self) -> None:
        self.controller.reset()


def _wire_name(section: str) -> str:
    """Map 'marketing_copy' style names to 'marketingCopy'."""
    head, *rest = section.split("_")
    return head + "".join(part.capitalize() for part in rest)
