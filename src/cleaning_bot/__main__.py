"""Run the bot: ``python -m cleaning_bot``.

uvicorn handles SIGINT/SIGTERM by running the lifespan shutdown (closing the
gateway connection). It then re-raises the signal into the previously
installed handler, so both signals are mapped to a clean exit with status 0.
"""

import signal
import sys

import uvicorn

from cleaning_bot.config import get_settings


def _exit_cleanly(signum, frame) -> None:
    sys.exit(0)


def main() -> None:
    settings = get_settings()
    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, _exit_cleanly)
    uvicorn.run(
        "cleaning_bot.app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
