"""Message pipeline: filter -> parse -> authorize -> handle -> reply.

``process_message`` is the single entry point the transport calls for each
inbound message. It sends at most one reply and never raises.
"""

import logging
from typing import Protocol

from cleaning_bot.bot import handlers
from cleaning_bot.bot.auth import is_authorized
from cleaning_bot.bot.filters import is_allowed_location, is_ignored
from cleaning_bot.bot.parser import Command, ParsedCommand, parse_command
from cleaning_bot.config import Settings
from cleaning_bot.models.message import InboundMessage
from cleaning_bot.schedule.client import ScheduleClient

logger = logging.getLogger(__name__)

# Log previews of outgoing replies are cut to this many characters
REPLY_PREVIEW_CHARS = 50


class ReplyTransport(Protocol):
    """Anything that can answer a message in its originating conversation."""

    async def reply(self, message: InboundMessage, text: str) -> None: ...


async def dispatch(
    parsed: ParsedCommand,
    message: InboundMessage,
    settings: Settings,
    schedule: ScheduleClient,
) -> str:
    """Run the handler for ``parsed`` and return its reply."""
    prefix = settings.command_prefix

    if parsed.is_admin and not is_authorized(message.sender_id, settings):
        logger.warning(
            "Unauthorized admin command",
            extra={"command": parsed.command.value, "sender": message.sender_id},
        )
        return handlers.UNAUTHORIZED_REPLY

    command = parsed.command
    if command is Command.PING:
        return handlers.handle_ping()
    if command is Command.CURRENT:
        return await handlers.handle_current(schedule)
    if command is Command.SCHEDULE:
        return await handlers.handle_schedule(schedule)
    if command is Command.UPCOMING:
        return await handlers.handle_upcoming(schedule)
    if command is Command.HELP:
        return handlers.handle_help(prefix)
    if command is Command.UPDATE_PEOPLE:
        return await handlers.handle_update_people(schedule, parsed.argument or "")
    if command is Command.UPDATE_DATE:
        return await handlers.handle_update_date(schedule, parsed.argument or "")
    return handlers.handle_unknown(prefix, parsed.text)


async def build_reply(
    message: InboundMessage,
    settings: Settings,
    schedule: ScheduleClient,
) -> str | None:
    """Return the reply text for ``message``, or None if it should be ignored.

    Filters are applied in order:
    1. Status broadcasts, non-text and own messages -> skip
    2. Origin not allowed by group/direct-message settings -> skip
    3. No command prefix -> skip
    """
    if is_ignored(message):
        return None

    if not is_allowed_location(message, settings):
        logger.info(
            "Ignoring message from restricted location",
            extra={"origin": message.origin_id, "group": message.is_group},
        )
        return None

    parsed = parse_command(message.body, settings.command_prefix)
    if parsed is None:
        return None

    logger.info(
        "Command received",
        extra={
            "sender": message.sender_id,
            "command": f"{settings.command_prefix}{parsed.text}",
            "recognized": parsed.command is not Command.UNKNOWN,
        },
    )
    return await dispatch(parsed, message, settings, schedule)


async def process_message(
    message: InboundMessage,
    settings: Settings,
    schedule: ScheduleClient,
    transport: ReplyTransport,
) -> str | None:
    """Handle one inbound message end to end.

    Any failure while building or sending the reply is logged and answered
    with a generic fallback reply. If that fails too, it is logged and dropped.

    Returns:
        The reply that was sent, or None if nothing was sent.
    """
    try:
        reply = await build_reply(message, settings, schedule)
        if not reply:
            return None

        logger.info(
            "Sending response: %s...",
            reply[:REPLY_PREVIEW_CHARS],
            extra={"origin": message.origin_id},
        )
        await transport.reply(message, reply)
        logger.info("Replied", extra={"origin": message.origin_id})
        return reply
    except Exception as exc:
        logger.error("Error processing message %s: %s", message.message_id, exc, exc_info=True)

    try:
        await transport.reply(message, handlers.FALLBACK_REPLY)
    except Exception:
        logger.error("Failed to send error reply to %s", message.origin_id, exc_info=True)
        return None

    logger.warning("Sent error reply", extra={"origin": message.origin_id})
    return handlers.FALLBACK_REPLY
