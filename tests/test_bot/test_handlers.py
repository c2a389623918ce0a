"""Tests for command handlers with a mocked scheduling API."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

from cleaning_bot.bot import handlers
from cleaning_bot.errors import RequestError
from cleaning_bot.models.schedule import CurrentRotation, Rotation, ScheduleSnapshot


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def _snapshot(upcoming_count: int = 5) -> ScheduleSnapshot:
    names = ["Robb", "Daenerys", "Jon", "Arya", "Sansa", "Bran"]
    first = _utc(2024, 4, 1)
    upcoming = [
        Rotation(
            person=names[(i + 1) % len(names)],
            period_start=first + timedelta(days=14 * i),
            period_end=first + timedelta(days=14 * i + 13),
        )
        for i in range(upcoming_count)
    ]
    return ScheduleSnapshot(
        people=["Robb", "Daenerys", "Jon"],
        start_date=_utc(2024, 3, 18),
        current_rotation=CurrentRotation(
            current_person="Robb",
            period_start=_utc(2024, 3, 18),
            period_end=_utc(2024, 3, 31),
        ),
        upcoming_rotations=upcoming,
    )


# -- current --


async def test_current_success(schedule_client: AsyncMock):
    schedule_client.get_current.return_value = CurrentRotation(
        current_person="Jon",
        period_start=_utc(2024, 3, 18),
        period_end=_utc(2024, 3, 31),
    )
    reply = await handlers.handle_current(schedule_client)
    assert "*Jon* is responsible" in reply
    assert "Monday, March 18, 2024 - Sunday, March 31, 2024" in reply


async def test_current_request_error(schedule_client: AsyncMock):
    schedule_client.get_current.side_effect = RequestError("API request failed")
    reply = await handlers.handle_current(schedule_client)
    assert reply == "❌ Error getting current schedule: API request failed"


# -- schedule --


async def test_schedule_overview(schedule_client: AsyncMock):
    schedule_client.get_schedule.return_value = _snapshot()
    reply = await handlers.handle_schedule(schedule_client)
    assert "👥 *People:* Robb, Daenerys, Jon" in reply
    assert "📅 *Started:* Monday, March 18, 2024" in reply
    assert "🎯 *Current: Robb*" in reply


async def test_schedule_truncates_upcoming_to_three(schedule_client: AsyncMock):
    """Only the first three upcoming rotations are listed, in order."""
    snapshot = _snapshot(upcoming_count=5)
    schedule_client.get_schedule.return_value = snapshot
    reply = await handlers.handle_schedule(schedule_client)

    section = reply.split("🔮 *Upcoming Rotations:*\n", 1)[1]
    lines = [line for line in section.splitlines() if line]
    assert len(lines) == 3
    for line, rotation in zip(lines, snapshot.upcoming_rotations[:3]):
        assert line.startswith(f"{rotation.person}: ")


async def test_schedule_request_error(schedule_client: AsyncMock):
    schedule_client.get_schedule.side_effect = RequestError("Schedule not configured")
    reply = await handlers.handle_schedule(schedule_client)
    assert reply == "❌ Error getting schedule: Schedule not configured"


# -- upcoming --


async def test_upcoming_lists_all(schedule_client: AsyncMock):
    snapshot = _snapshot(upcoming_count=5)
    schedule_client.get_schedule.return_value = snapshot
    reply = await handlers.handle_upcoming(schedule_client)
    assert reply.startswith("🔮 *Upcoming Cleaning Rotations*")
    assert reply.count("📅 ") == 5
    assert "Monday, April 1, 2024 - Sunday, April 14, 2024" in reply


async def test_upcoming_request_error(schedule_client: AsyncMock):
    schedule_client.get_schedule.side_effect = RequestError("boom")
    reply = await handlers.handle_upcoming(schedule_client)
    assert reply == "❌ Error getting upcoming schedule: boom"


# -- update people --


async def test_update_people_success(schedule_client: AsyncMock):
    reply = await handlers.handle_update_people(schedule_client, "Robb, Jon")
    schedule_client.update_people.assert_awaited_once_with(["Robb", "Jon"])
    assert "New list: Robb, Jon" in reply


async def test_update_people_empty_list_skips_api(schedule_client: AsyncMock):
    reply = await handlers.handle_update_people(schedule_client, "  , ,")
    assert reply == handlers.PEOPLE_USAGE_REPLY
    schedule_client.update_people.assert_not_called()


async def test_update_people_request_error(schedule_client: AsyncMock):
    schedule_client.update_people.side_effect = RequestError("Invalid API key")
    reply = await handlers.handle_update_people(schedule_client, "Robb")
    assert reply == "❌ Error updating people: Invalid API key"


# -- update date --


async def test_update_date_success(schedule_client: AsyncMock):
    reply = await handlers.handle_update_date(schedule_client, "2024-03-17")
    schedule_client.update_start_date.assert_awaited_once_with(_utc(2024, 3, 17))
    assert "New start date: Sunday, March 17, 2024" in reply


async def test_update_date_invalid_skips_api(schedule_client: AsyncMock):
    reply = await handlers.handle_update_date(schedule_client, "not-a-date")
    assert reply == handlers.DATE_USAGE_REPLY
    schedule_client.update_start_date.assert_not_called()


async def test_update_date_request_error(schedule_client: AsyncMock):
    schedule_client.update_start_date.side_effect = RequestError("API request failed")
    reply = await handlers.handle_update_date(schedule_client, "2024-03-17")
    assert reply == "❌ Error updating start date: API request failed"


# -- static replies --


def test_help_uses_configured_prefix():
    reply = handlers.handle_help("/")
    assert "`/current`" in reply
    assert "`/update people Robb, Daenerys, Jon`" in reply
    assert "`!" not in reply


def test_ping():
    assert handlers.handle_ping() == "🏓 Pong! Bot is working!"


def test_unknown_points_to_help():
    reply = handlers.handle_unknown("!", "dance")
    assert "`!dance`" in reply
    assert "`!help`" in reply


async def test_update_date_out_of_range_skips_api(schedule_client: AsyncMock):
    reply = await handlers.handle_update_date(schedule_client, "0001-01-01T00:00:00+01:00")
    assert reply == handlers.DATE_USAGE_REPLY
    schedule_client.update_start_date.assert_not_called()
