"""WhatsApp webhook router: event dispatch and lifecycle logging."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from cleaning_bot.bot.pipeline import process_message
from cleaning_bot.whatsapp.adapter import InvalidPayloadError, normalize, normalize_event_name
from cleaning_bot.whatsapp.verification import verify_webhook_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/whatsapp", tags=["whatsapp"])


def handle_lifecycle_event(event: str, payload: dict) -> None:
    """Log gateway connection events. No recovery is attempted here.

    An "open" connection means the session is authenticated and ready. Error
    events, and any event carrying an ``error`` field, are logged as errors;
    everything else is logged at info so no gateway event goes unseen.
    """
    data = payload.get("data")
    if not isinstance(data, dict):
        data = {}
    instance = payload.get("instance")

    if "error" in event or data.get("error"):
        logger.error(
            "WhatsApp gateway error",
            extra={"event": event, "instance": instance, "error": data.get("error") or data.get("message")},
        )
    elif event == "connection.update":
        state = data.get("state")
        if state == "open":
            logger.info("WhatsApp authenticated and ready", extra={"instance": instance})
        elif state == "close":
            logger.warning(
                "WhatsApp disconnected",
                extra={"instance": instance, "reason": data.get("statusReason")},
            )
        else:
            logger.info("WhatsApp connection state changed", extra={"state": state})
    elif event == "qrcode.updated":
        logger.warning(
            "WhatsApp pairing required: scan the QR code from the gateway "
            "(Settings -> Linked Devices -> Link a Device)",
            extra={"instance": instance},
        )
    elif event == "logout.instance":
        logger.error("WhatsApp authentication lost", extra={"instance": instance})
    else:
        logger.info("Unhandled webhook event", extra={"event": event, "instance": instance})


@router.post("/webhook")
async def whatsapp_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    payload: dict = Depends(verify_webhook_request),
) -> JSONResponse:
    """Receive Evolution API webhook events.

    ``messages.upsert`` is normalized and handed to the message pipeline in
    the background so the gateway gets its acknowledgement immediately.
    Malformed message payloads are acknowledged and dropped.
    """
    event = normalize_event_name(payload)

    if event != "messages.upsert":
        handle_lifecycle_event(event, payload)
        return JSONResponse({"ok": True})

    try:
        message = normalize(payload)
    except InvalidPayloadError as exc:
        logger.warning("Invalid message payload: %s", exc)
        return JSONResponse({"ok": True})

    state = request.app.state
    background_tasks.add_task(
        process_message,
        message,
        state.settings,
        state.schedule_client,
        state.whatsapp_client,
    )
    return JSONResponse({"ok": True})
