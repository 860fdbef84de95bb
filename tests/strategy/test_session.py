"""
Tests for the strategy session and its presentation boundaries.
"""

import asyncio
import logging
from unittest.mock import MagicMock, AsyncMock

import pytest

from marketeer.clients.base import GenerationClient
from marketeer.core.error_handler import TransportError, ValidationError
from marketeer.strategy.models import WorkflowState, WorkflowStatus
from marketeer.strategy.session import (
    Clipboard,
    LoggingNotifier,
    NotificationKind,
    Notifier,
    StrategySession
)

BRIEF = "A sustainable water bottle made from recycled ocean plastic."
VALID_RAW = '{"marketingCopy":"Copy text","visualStrategy":"Visual text","targetAudience":"Audience text"}'


class RecordingNotifier(Notifier):
    def __init__(self):
        self.messages = []

    def notify(self, kind, message):
        self.messages.append((kind, message))


class RecordingClipboard(Clipboard):
    def __init__(self, fail=False):
        self.fail = fail
        self.copied = []

    def copy(self, text):
        if self.fail:
            raise OSError("clipboard unavailable")
        self.copied.append(text)


def make_client(result=None, error=None):
    client = MagicMock(spec=GenerationClient)
    client.generate = AsyncMock(return_value=result, side_effect=error)
    return client


class TestStrategySession:
    """
    Tests for the StrategySession class.
    """

    @pytest.fixture
    def notifier(self):
        return RecordingNotifier()

    @pytest.fixture
    def clipboard(self):
        return RecordingClipboard()

    @pytest.fixture
    def session(self, notifier, clipboard):
        return StrategySession(make_client(VALID_RAW), notifier=notifier, clipboard=clipboard)

    def test_success_notification(self, session, notifier):
        state = asyncio.run(session.generate(BRIEF))

        assert state.status is WorkflowStatus.SUCCEEDED
        assert notifier.messages == [(NotificationKind.SUCCESS, "Marketing strategy generated!")]

    def test_failure_notification(self, notifier):
        session = StrategySession(make_client(error=TransportError("boom")), notifier=notifier)

        state = asyncio.run(session.generate(BRIEF))

        assert state.status is WorkflowStatus.FAILED
        assert notifier.messages == [(NotificationKind.ERROR, "Generation failed. Please try again.")]

    def test_shape_failure_notification(self, notifier):
        session = StrategySession(make_client('{"marketingCopy": "A"}'), notifier=notifier)

        state = asyncio.run(session.generate(BRIEF))

        assert state.status is WorkflowStatus.FAILED
        assert notifier.messages == [(NotificationKind.ERROR, "Generation failed. Please try again.")]

    def test_validation_error_is_notified_and_raised(self, session, notifier):
        with pytest.raises(ValidationError):
            asyncio.run(session.generate("short"))

        assert notifier.messages == [(NotificationKind.ERROR, "Minimum 20 characters required")]
        assert session.state == WorkflowState.idle()

    def test_edit_then_generate(self, session):
        result = session.edit(BRIEF)
        state = asyncio.run(session.generate())

        assert result.eligible is True
        assert state.strategy.marketing_copy == "Copy text"

    @pytest.mark.parametrize("section, label, text", [
        ("marketingCopy", "Marketing copy", "Copy text"),
        ("visual_strategy", "Visual strategy", "Visual text"),
        ("targetAudience", "Target audience", "Audience text"),
    ])
    def test_copy_section(self, session, notifier, clipboard, section, label, text):
        asyncio.run(session.generate(BRIEF))
        notifier.messages.clear()

        copied = session.copy_section(section)

        assert copied == text
        assert clipboard.copied == [text]
        assert notifier.messages == [(NotificationKind.SUCCESS, f"{label} copied to clipboard!")]

    def test_copy_without_strategy(self, session, clipboard):
        with pytest.raises(ValidationError):
            session.copy_section("marketingCopy")

        assert clipboard.copied == []

    def test_copy_unknown_section(self, session):
        asyncio.run(session.generate(BRIEF))

        with pytest.raises(ValueError):
            session.copy_section("slogan")

    def test_copy_failure_is_notified(self, notifier):
        session = StrategySession(make_client(VALID_RAW), notifier=notifier, clipboard=RecordingClipboard(fail=True))
        asyncio.run(session.generate(BRIEF))
        notifier.messages.clear()

        text = session.copy_section("marketingCopy")

        assert text == "Copy text"
        assert notifier.messages == [(NotificationKind.ERROR, "Could not copy marketing copy to clipboard")]

    def test_copy_without_clipboard(self, notifier):
        session = StrategySession(make_client(VALID_RAW), notifier=notifier)
        asyncio.run(session.generate(BRIEF))
        notifier.messages.clear()

        session.copy_section("targetAudience")

        assert notifier.messages == [(NotificationKind.ERROR, "Clipboard is not available")]

    def test_reset(self, session):
        asyncio.run(session.generate(BRIEF))

        session.reset()

        assert session.state == WorkflowState.idle()
        assert session.controller.brief == ""

    def test_sessions_are_independent(self):
        first = StrategySession(make_client(VALID_RAW))
        second = StrategySession(make_client(VALID_RAW))

        asyncio.run(first.generate(BRIEF))

        assert first.state.status is WorkflowStatus.SUCCEEDED
        assert second.state == WorkflowState.idle()
        assert first.controller is not second.controller

    def test_logging_notifier(self, caplog):
        notifier = LoggingNotifier()

        with caplog.at_level(logging.INFO, logger="marketeer.strategy.session"):
            notifier.notify(NotificationKind.SUCCESS, "all good")
            notifier.notify(NotificationKind.ERROR, "went wrong")

        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.INFO, "all good") in levels
        assert (logging.ERROR, "went wrong") in levels
