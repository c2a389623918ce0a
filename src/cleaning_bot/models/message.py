"""Inbound chat message model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

STATUS_BROADCAST_ID = "status@broadcast"


class OriginKind(str, Enum):
    """Whether a message came from a direct chat or a group chat."""

    DIRECT = "direct"
    GROUP = "group"


class MessageKind(str, Enum):
    """Content kind of a message. Only plain text is processed."""

    TEXT = "text"
    OTHER = "other"


class InboundMessage(BaseModel):
    """A chat message received from the transport, normalized and immutable."""

    model_config = ConfigDict(frozen=True)

    message_id: str
    origin_id: str  # Chat JID, e.g. "15551234567@s.whatsapp.net" or "1203...@g.us"
    origin_kind: OriginKind
    sender_id: str  # Group participant for group messages, origin_id otherwise
    body: str = ""
    kind: MessageKind = MessageKind.TEXT
    from_me: bool = False

    @property
    def is_group(self) -> bool:
        return self.origin_kind is OriginKind.GROUP

    @property
    def is_status_broadcast(self) -> bool:
        return self.origin_id == STATUS_BROADCAST_ID
