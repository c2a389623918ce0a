"""Shared test fixtures."""

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from cleaning_bot.config import Settings
from cleaning_bot.models.message import InboundMessage, MessageKind, OriginKind

DIRECT_JID = "15551234567@s.whatsapp.net"


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings from keyword overrides, ignoring any local .env file."""

    def _make(**overrides: object) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def make_message() -> Callable[..., InboundMessage]:
    """Build a direct text InboundMessage with overrides."""

    def _make(**overrides: object) -> InboundMessage:
        base: dict = {
            "message_id": "3EB0C767D26A1D8E",
            "origin_id": DIRECT_JID,
            "origin_kind": OriginKind.DIRECT,
            "sender_id": DIRECT_JID,
            "body": "!ping",
            "kind": MessageKind.TEXT,
        }
        base.update(overrides)
        return InboundMessage(**base)

    return _make


@pytest.fixture
def schedule_client() -> AsyncMock:
    """An AsyncMock standing in for ScheduleClient."""
    return AsyncMock()
