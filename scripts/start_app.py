#!/usr/bin/env python3
"""Serve the Agora API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from agora.config import Settings
from agora.util.observability import configure_logfire

APP_PATH = "agora.interface.api.app:app"


def main() -> int:
    """Configure observability, then hand the process over to uvicorn."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("start_app", environment=settings.environment):
        try:
            uvicorn.run(
                APP_PATH,
                host=settings.api.host,
                port=settings.api.port,
                reload=settings.environment == "development",
                log_level="debug" if settings.debug else "info",
            )
        except Exception as e:
            logfire.error(
                "Agora API failed to start",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
