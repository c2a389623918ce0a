"""Outbound WhatsApp messaging via the Evolution API gateway.

One httpx.AsyncClient is created at startup and closed on shutdown, which
releases the transport connection. Sends are retried once on network errors
and 5xx responses.
"""

import logging

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from cleaning_bot.config import Settings
from cleaning_bot.models.message import InboundMessage

logger = logging.getLogger(__name__)

HTTP_TIMEOUT = 10.0


def _is_retryable(error: BaseException) -> bool:
    """Network failures and gateway 5xx responses are worth one more try."""
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500
    return False


class WhatsAppClient:
    """Sends text messages through an Evolution API instance.

    Args:
        settings: Application settings (gateway URL, instance, API key).
        transport: Optional httpx transport, used by tests to stub the gateway.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        base_url = settings.evolution_base_url.rstrip("/")
        self._send_url = f"{base_url}/message/sendText/{settings.evolution_instance}"
        self._http = httpx.AsyncClient(
            headers={"apikey": settings.evolution_api_key},
            timeout=httpx.Timeout(HTTP_TIMEOUT),
            transport=transport,
        )

    @retry(
        retry=retry_if_exception(_is_retryable),
        wait=wait_fixed(0.2),
        stop=stop_after_attempt(2),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def send_text(self, number: str, text: str, quoted_id: str | None = None) -> None:
        """Send ``text`` to a chat JID, optionally quoting a message by id.

        Raises:
            httpx.HTTPError: If the gateway is unreachable or rejects the send.
        """
        payload: dict = {"number": number, "text": text}
        if quoted_id:
            payload["quoted"] = {"key": {"id": quoted_id}}

        response = await self._http.post(self._send_url, json=payload)
        response.raise_for_status()
        logger.debug("Outbound message sent", extra={"text_len": len(text)})

    async def reply(self, message: InboundMessage, text: str) -> None:
        """Answer ``message`` in its originating chat, quoting it."""
        await self.send_text(message.origin_id, text, quoted_id=message.message_id)

    async def aclose(self) -> None:
        await self._http.aclose()
