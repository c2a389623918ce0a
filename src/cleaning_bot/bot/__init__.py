"""Chat command pipeline: filtering, parsing, authorization and replies."""

from cleaning_bot.bot.parser import Command, ParsedCommand, parse_command
from cleaning_bot.bot.pipeline import ReplyTransport, build_reply, process_message

__all__ = [
    "Command",
    "ParsedCommand",
    "ReplyTransport",
    "build_reply",
    "parse_command",
    "process_message",
]
