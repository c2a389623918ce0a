"""Command grammar: prefix stripping and command classification."""

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    """Commands the bot understands."""

    PING = "ping"
    CURRENT = "current"
    SCHEDULE = "schedule"
    UPCOMING = "upcoming"
    HELP = "help"
    UPDATE_PEOPLE = "update people"
    UPDATE_DATE = "update date"
    UNKNOWN = "unknown"


# Exact matches, after lower-casing
FIXED_COMMANDS: dict[str, Command] = {
    "test": Command.PING,
    "ping": Command.PING,
    "current": Command.CURRENT,
    "who": Command.CURRENT,
    "now": Command.CURRENT,
    "schedule": Command.SCHEDULE,
    "all": Command.SCHEDULE,
    "upcoming": Command.UPCOMING,
    "next": Command.UPCOMING,
    "help": Command.HELP,
    "commands": Command.HELP,
}

# Literal lower-case prefixes; the rest of the text is the argument
PREFIX_COMMANDS: tuple[tuple[str, Command], ...] = (
    ("update people ", Command.UPDATE_PEOPLE),
    ("update date ", Command.UPDATE_DATE),
)

ADMIN_COMMANDS = frozenset({Command.UPDATE_PEOPLE, Command.UPDATE_DATE})


@dataclass(frozen=True)
class ParsedCommand:
    """A classified bot invocation.

    ``text`` is the lower-cased command as typed (without prefix), used for
    logging and the unknown-command reply. ``argument`` keeps its original casing.
    """

    command: Command
    text: str
    argument: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.command in ADMIN_COMMANDS


def parse_command(text: str, prefix: str) -> ParsedCommand | None:
    """Classify a message body.

    Returns None when the text does not start with ``prefix`` (not a bot
    invocation). Otherwise returns a ParsedCommand, with ``Command.UNKNOWN``
    for anything outside the grammar.
    """
    content = text.strip()
    if not content.startswith(prefix):
        return None

    remainder = content[len(prefix):].strip()
    lowered = remainder.lower()

    fixed = FIXED_COMMANDS.get(lowered)
    if fixed is not None:
        return ParsedCommand(command=fixed, text=lowered)

    for literal, command in PREFIX_COMMANDS:
        if lowered.startswith(literal):
            return ParsedCommand(command=command, text=lowered, argument=remainder[len(literal):])

    return ParsedCommand(command=Command.UNKNOWN, text=lowered)
