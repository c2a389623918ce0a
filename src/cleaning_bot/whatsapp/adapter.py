"""Evolution API adapter: validate and normalize webhook payloads."""

from typing import Any

from cleaning_bot.models.message import InboundMessage, MessageKind, OriginKind

GROUP_JID_SUFFIX = "@g.us"

# Evolution messageType values that carry plain text
TEXT_MESSAGE_TYPES = ("conversation", "extendedTextMessage")


class InvalidPayloadError(Exception):
    """Raised when an Evolution payload has an invalid shape."""


def normalize_event_name(payload: dict[str, Any]) -> str:
    """Return the event name in dotted lower case ("MESSAGES_UPSERT" -> "messages.upsert")."""
    event = payload.get("event") or ""
    return str(event).lower().replace("_", ".")


def _extract_text(message_type: str, message: dict[str, Any]) -> str:
    if message_type == "conversation":
        return message.get("conversation") or ""
    if message_type == "extendedTextMessage":
        return (message.get("extendedTextMessage") or {}).get("text") or ""
    return ""


def normalize(payload: dict[str, Any]) -> InboundMessage:
    """Normalize a ``messages.upsert`` payload into an InboundMessage.

    Args:
        payload: Raw webhook payload from Evolution API.

    Returns:
        InboundMessage with origin, sender, text body and kind.

    Raises:
        InvalidPayloadError: If required fields are missing or invalid.
    """
    data = payload.get("data")
    if not isinstance(data, dict):
        raise InvalidPayloadError("missing data")
    key = data.get("key") or {}

    message_id = key.get("id")
    if not message_id or not isinstance(message_id, str):
        raise InvalidPayloadError("missing or invalid message_id")

    remote_jid = key.get("remoteJid")
    if not remote_jid or not isinstance(remote_jid, str):
        raise InvalidPayloadError("missing remoteJid")

    is_group = remote_jid.endswith(GROUP_JID_SUFFIX)
    sender_id = (key.get("participant") or remote_jid) if is_group else remote_jid

    message_type = str(data.get("messageType") or "unknown")
    text = _extract_text(message_type, data.get("message") or {})
    kind = MessageKind.TEXT if message_type in TEXT_MESSAGE_TYPES else MessageKind.OTHER

    return InboundMessage(
        message_id=message_id,
        origin_id=remote_jid,
        origin_kind=OriginKind.GROUP if is_group else OriginKind.DIRECT,
        sender_id=sender_id,
        body=text,
        kind=kind,
        from_me=bool(key.get("fromMe", False)),
    )
