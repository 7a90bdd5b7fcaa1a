"""Logfire setup.

Domain services open spans named ``<service>.<operation>`` and emit
structured events with string IDs as attributes::

    with logfire.span("vote_service.apply_vote", entity_id=str(entity_id)):
        logfire.info("Vote applied", vote_score=tally.vote_score)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import ObservabilitySettings, Settings

SERVICE_NAME = "agora-api"


def _should_send(observability: ObservabilitySettings) -> bool:
    """Explicit flag wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is None:
        return bool(observability.logfire_token)
    return observability.send_to_logfire


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Console output is always on; cloud export follows the observability
    settings.
    """
    send = _should_send(settings.observability)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured", environment=settings.environment, send_to_logfire=send
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span per HTTP request.

    Headers are not captured: Authorization carries bearer tokens.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span per SQL statement issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented", url=engine.url.render_as_string())
