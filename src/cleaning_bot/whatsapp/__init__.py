"""WhatsApp ingress and egress through the Evolution API gateway."""

from cleaning_bot.whatsapp.adapter import InvalidPayloadError, normalize
from cleaning_bot.whatsapp.client import WhatsAppClient
from cleaning_bot.whatsapp.router import router

__all__ = [
    "InvalidPayloadError",
    "WhatsAppClient",
    "normalize",
    "router",
]
