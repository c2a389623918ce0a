"""Authorization for admin commands."""

from cleaning_bot.config import Settings


def is_authorized(sender_id: str, settings: Settings) -> bool:
    """Return True if ``sender_id`` may run admin commands.

    An empty ``authorized_numbers`` list authorizes everyone. Matching is by
    substring so "1555" matches "15551234567@s.whatsapp.net".
    """
    if not settings.authorized_numbers:
        return True
    return any(number in sender_id for number in settings.authorized_numbers)
