"""Data models for chat messages and schedule snapshots."""

from cleaning_bot.models.message import InboundMessage, MessageKind, OriginKind
from cleaning_bot.models.schedule import CurrentRotation, Rotation, ScheduleSnapshot

__all__ = [
    "InboundMessage",
    "MessageKind",
    "OriginKind",
    "CurrentRotation",
    "Rotation",
    "ScheduleSnapshot",
]
