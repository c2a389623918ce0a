"""Schedule snapshot models returned by the scheduling API.

The API speaks camelCase JSON; fields are exposed in snake_case with aliases.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CurrentRotation(_ApiModel):
    """Who is responsible right now, and for which period."""

    current_person: str = Field(alias="currentPerson")
    period_start: datetime = Field(alias="periodStart")
    period_end: datetime = Field(alias="periodEnd")


class Rotation(_ApiModel):
    """One upcoming rotation period."""

    person: str
    period_start: datetime = Field(alias="periodStart")
    period_end: datetime = Field(alias="periodEnd")


class ScheduleSnapshot(_ApiModel):
    """Full schedule as returned by GET /schedule. Fetched per request, never cached."""

    people: list[str]
    start_date: datetime = Field(alias="startDate")
    current_rotation: CurrentRotation = Field(alias="currentRotation")
    upcoming_rotations: list[Rotation] = Field(default_factory=list, alias="upcomingRotations")
