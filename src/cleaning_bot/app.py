"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cleaning_bot.config import Settings, get_settings
from cleaning_bot.logging_config import configure_logging
from cleaning_bot.schedule.client import ScheduleClient
from cleaning_bot.whatsapp.client import WhatsAppClient
from cleaning_bot.whatsapp.router import router as whatsapp_router

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def log_startup(settings: Settings) -> None:
    """Log the effective configuration (secrets reported as set/unset only)."""
    logger.info(
        "Cleaning schedule bot is ready",
        extra={
            "api_url": settings.api_base_url,
            "api_key_configured": bool(settings.api_key),
            "authorized_numbers": ", ".join(settings.authorized_numbers) or "All numbers",
            "command_prefix": settings.command_prefix,
            "direct_messages": "Allowed" if settings.allow_direct_messages else "Blocked",
            "allowed_groups": ", ".join(settings.allowed_groups) or "All groups",
        },
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, build clients, release them on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app.state.settings = settings
    app.state.schedule_client = ScheduleClient(settings)
    app.state.whatsapp_client = WhatsAppClient(settings)
    log_startup(settings)

    yield

    logger.info("Shutting down WhatsApp bot")
    await app.state.whatsapp_client.aclose()
    await app.state.schedule_client.aclose()


app = FastAPI(
    title="Cleaning Bot",
    lifespan=lifespan,
)
app.include_router(whatsapp_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "cleaning-bot",
        "version": VERSION,
    }
