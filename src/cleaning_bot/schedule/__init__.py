"""Scheduling API client."""

from cleaning_bot.schedule.client import ScheduleClient, to_iso_instant

__all__ = ["ScheduleClient", "to_iso_instant"]
