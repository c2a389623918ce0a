"""Date rendering and argument parsing for chat replies.

Dates are always shown in UTC with English names so replies read the same
whatever the server locale or timezone.
"""

from datetime import date, datetime, timezone

from cleaning_bot.errors import ValidationError

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(value: datetime) -> str:
    """Format as e.g. "Sunday, March 17, 2024". Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return f"{WEEKDAYS[value.weekday()]}, {MONTHS[value.month - 1]} {value.day}, {value.year}"


def parse_start_date(raw: str) -> datetime:
    """Parse a user-supplied date into an aware UTC datetime.

    "2024-03-17" becomes midnight UTC. Full ISO date-times are accepted too;
    without an offset they are read as UTC.

    Raises:
        ValidationError: If ``raw`` is not an ISO-8601 date or date-time.
    """
    raw = raw.strip()
    if not raw:
        raise ValidationError("missing date")

    try:
        day = date.fromisoformat(raw)
    except ValueError:
        pass
    else:
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)

    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(f"invalid date: {raw!r}") from exc

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as exc:
        # e.g. 0001-01-01T00:00:00+01:00 has no UTC representation
        raise ValidationError(f"date out of range: {raw!r}") from exc


def parse_people(raw: str) -> list[str]:
    """Split a comma-separated list of names, dropping blanks.

    Raises:
        ValidationError: If no names remain.
    """
    people = [name.strip() for name in raw.split(",")]
    people = [name for name in people if name]
    if not people:
        raise ValidationError("empty people list")
    return people
