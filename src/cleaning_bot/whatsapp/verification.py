"""Webhook shared-secret verification as a FastAPI dependency."""

import hmac

from fastapi import HTTPException, Request

WEBHOOK_SECRET_HEADER = "X-Webhook-Secret"


async def verify_webhook_request(request: Request) -> dict:
    """Check the webhook secret header and return the parsed JSON payload.

    An empty ``webhook_secret`` setting disables the check.

    Raises HTTPException(403) if the secret does not match, and
    HTTPException(400) if the body is not a JSON object.
    """
    settings = request.app.state.settings
    expected = settings.webhook_secret
    if expected:
        provided = request.headers.get(WEBHOOK_SECRET_HEADER, "")
        if not hmac.compare_digest(provided.encode(), expected.encode()):
            raise HTTPException(status_code=403, detail="Invalid webhook secret")

    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON body") from None

    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON body")
    return payload
