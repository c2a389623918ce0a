"""Async HTTP client for the cleaning schedule API.

Wraps a single httpx.AsyncClient created at startup. Every failure, whether
a network error, a non-success status or an unreadable body, is surfaced as
``RequestError`` so command handlers only have one error kind to render.
Requests are never retried.
"""

import logging
from datetime import datetime, timezone
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from cleaning_bot.config import Settings
from cleaning_bot.errors import RequestError
from cleaning_bot.models.schedule import CurrentRotation, ScheduleSnapshot

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"
GENERIC_ERROR = "API request failed"


def to_iso_instant(value: datetime) -> str:
    """Render a datetime as a UTC instant with millisecond precision, e.g. 2024-03-17T00:00:00.000Z."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _error_message(response: httpx.Response) -> str:
    """Pull the remote ``error`` field from a failed response, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return GENERIC_ERROR


class ScheduleClient:
    """Thin wrapper around the scheduling REST API.

    Args:
        settings: Application settings (base URL, API key, timeout).
        transport: Optional httpx transport, used by tests to stub the API.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._base_url = settings.api_base_url.rstrip("/")
        self._api_key = settings.api_key
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.api_timeout),
            transport=transport,
        )

    async def call(self, endpoint: str, method: str = "GET", body: dict | None = None) -> Any:
        """Call ``{base_url}{endpoint}`` and return the decoded JSON body.

        GET requests carry neither a body nor the API key. Any other method
        sends the API key header and ``body`` as JSON.

        Raises:
            RequestError: On network failure or a non-success status. The
                message is the remote ``error`` field when present.
        """
        method = method.upper()
        url = f"{self._base_url}{endpoint}"
        headers: dict[str, str] = {}
        kwargs: dict[str, Any] = {}

        if method != "GET":
            headers[API_KEY_HEADER] = self._api_key
            if body is not None:
                kwargs["json"] = body

        try:
            response = await self._http.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("API error: %s %s failed: %s", method, endpoint, exc)
            raise RequestError(GENERIC_ERROR) from exc

        if not response.is_success:
            message = _error_message(response)
            logger.error(
                "API error: %s %s returned %d: %s",
                method,
                endpoint,
                response.status_code,
                message,
            )
            raise RequestError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("API error: %s %s returned a non-JSON body", method, endpoint)
            raise RequestError(GENERIC_ERROR, status_code=response.status_code) from exc

    async def get_current(self) -> CurrentRotation:
        """GET /current: the person responsible right now."""
        data = await self.call("/current")
        return _parse(CurrentRotation, data, "/current")

    async def get_schedule(self) -> ScheduleSnapshot:
        """GET /schedule: people, start date, current and upcoming rotations."""
        data = await self.call("/schedule")
        return _parse(ScheduleSnapshot, data, "/schedule")

    async def update_people(self, people: list[str]) -> Any:
        """PUT /schedule with a new rotation order."""
        return await self.call("/schedule", "PUT", {"people": people})

    async def update_start_date(self, start: datetime) -> Any:
        """PUT /schedule with a new rotation start instant."""
        return await self.call("/schedule", "PUT", {"startDate": to_iso_instant(start)})

    async def aclose(self) -> None:
        await self._http.aclose()


def _parse(model, data: Any, endpoint: str):
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        logger.error("API error: unexpected response shape from %s: %s", endpoint, exc)
        raise RequestError(GENERIC_ERROR) from exc
