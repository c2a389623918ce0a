"""Decide whether an inbound message should be processed at all."""

from cleaning_bot.config import Settings
from cleaning_bot.models.message import InboundMessage, MessageKind


def is_ignored(message: InboundMessage) -> bool:
    """Return True for messages that are never processed, whatever the configuration.

    Status broadcasts, non-text messages and the bot's own messages are skipped.
    """
    if message.is_status_broadcast:
        return True
    if message.kind is not MessageKind.TEXT:
        return True
    return message.from_me


def is_allowed_location(message: InboundMessage, settings: Settings) -> bool:
    """Apply the direct-message flag and the group allow-list.

    With no group allow-list and direct messages not enabled, nothing is
    restricted. Otherwise direct messages need ``allow_direct_messages`` and
    group messages need an empty allow-list or an origin id containing one
    of the allow-listed substrings.
    """
    if not settings.allowed_groups and not settings.allow_direct_messages:
        return True

    if not message.is_group:
        return settings.allow_direct_messages

    if not settings.allowed_groups:
        return True
    return any(group in message.origin_id for group in settings.allowed_groups)
