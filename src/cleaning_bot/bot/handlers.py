"""Command handlers: turn a parsed command into a reply string.

Every handler that talks to the scheduling API catches ``RequestError`` and
returns a "❌ Error ..." reply instead. Argument problems are caught before
any API call and answered with a usage example.
"""

import logging

from cleaning_bot.bot.formatting import format_date, parse_people, parse_start_date
from cleaning_bot.errors import RequestError, ValidationError
from cleaning_bot.schedule.client import ScheduleClient

logger = logging.getLogger(__name__)

SCHEDULE_PREVIEW_SIZE = 3

PONG_REPLY = "🏓 Pong! Bot is working!"
UNAUTHORIZED_REPLY = "🔒 Sorry, you are not authorized to use admin commands."
FALLBACK_REPLY = "❌ Sorry, something went wrong. Please try again later."
PEOPLE_USAGE_REPLY = (
    "❌ Please provide a list of people separated by commas.\n"
    "Example: Robb, Daenerys, Jon, Arya"
)
DATE_USAGE_REPLY = "❌ Invalid date format. Please use: YYYY-MM-DD\nExample: 2024-03-17"


def handle_ping() -> str:
    return PONG_REPLY


async def handle_current(schedule: ScheduleClient) -> str:
    """Who is responsible right now."""
    try:
        current = await schedule.get_current()
    except RequestError as exc:
        return f"❌ Error getting current schedule: {exc.message}"

    return (
        "🧹 *Current Cleaning Schedule*\n\n"
        f"👤 *{current.current_person}* is responsible\n"
        f"📅 {format_date(current.period_start)} - {format_date(current.period_end)}\n"
    )


async def handle_schedule(schedule: ScheduleClient) -> str:
    """Overview: people, start date, current rotation and the next few rotations."""
    try:
        snapshot = await schedule.get_schedule()
    except RequestError as exc:
        return f"❌ Error getting schedule: {exc.message}"

    current = snapshot.current_rotation
    lines = [
        "📋 *Cleaning Schedule Overview*\n",
        f"👥 *People:* {', '.join(snapshot.people)}",
        f"📅 *Started:* {format_date(snapshot.start_date)}\n",
        f"🎯 *Current: {current.current_person}*",
        f"{format_date(current.period_start)} - {format_date(current.period_end)}\n",
        "🔮 *Upcoming Rotations:*",
    ]
    for rotation in snapshot.upcoming_rotations[:SCHEDULE_PREVIEW_SIZE]:
        lines.append(f"{rotation.person}: {format_date(rotation.period_start)}")

    return "\n".join(lines) + "\n"


async def handle_upcoming(schedule: ScheduleClient) -> str:
    """Every upcoming rotation with its full period."""
    try:
        snapshot = await schedule.get_schedule()
    except RequestError as exc:
        return f"❌ Error getting upcoming schedule: {exc.message}"

    message = "🔮 *Upcoming Cleaning Rotations*\n\n"
    for rotation in snapshot.upcoming_rotations:
        message += f"*{rotation.person}*\n"
        message += f"📅 {format_date(rotation.period_start)} - {format_date(rotation.period_end)}\n"
    return message


async def handle_update_people(schedule: ScheduleClient, argument: str) -> str:
    """Replace the rotation order with a comma-separated list of names."""
    try:
        people = parse_people(argument)
    except ValidationError:
        return PEOPLE_USAGE_REPLY

    try:
        await schedule.update_people(people)
    except RequestError as exc:
        return f"❌ Error updating people: {exc.message}"

    logger.info("People updated", extra={"people_count": len(people)})
    return f"✅ *People updated successfully!*\n\n👥 New list: {', '.join(people)}"


async def handle_update_date(schedule: ScheduleClient, argument: str) -> str:
    """Move the rotation start date."""
    try:
        start = parse_start_date(argument)
    except ValidationError:
        return DATE_USAGE_REPLY

    try:
        await schedule.update_start_date(start)
    except RequestError as exc:
        return f"❌ Error updating start date: {exc.message}"

    logger.info("Start date updated", extra={"start_date": start.isoformat()})
    return f"✅ *Start date updated successfully!*\n\n📅 New start date: {format_date(start)}"


def handle_help(prefix: str) -> str:
    """Static usage text with the configured prefix."""
    return (
        "🤖 *Cleaning Schedule Bot Commands*\n\n"
        "📋 *Public Commands:*\n"
        f"• `{prefix}current` - Who's cleaning now?\n"
        f"• `{prefix}schedule` - Full schedule overview\n"
        f"• `{prefix}upcoming` - Next rotations\n"
        f"• `{prefix}help` - Show this help\n"
        f"• `{prefix}ping` - Check the bot is alive\n\n"
        "🔐 *Admin Commands:*\n"
        f"• `{prefix}update people Robb, Daenerys, Jon` - Update people list\n"
        f"• `{prefix}update date 2024-03-17` - Update start date\n\n"
        "💡 *Tips:*\n"
        "• Each person cleans for exactly 2 weeks\n"
        "• Rotation goes Monday to Sunday"
    )


def handle_unknown(prefix: str, command_text: str) -> str:
    return (
        f"🤔 Unknown command: `{prefix}{command_text}`\n\n"
        f"Type `{prefix}help` to see available commands."
    )
