"""Logfire setup and instrumentation.

Services and repositories emit their own spans and events directly::

    with logfire.span("comment_service.create_reply", parent_id=str(parent.id)):
        ...
    logfire.info("Reply created", comment_id=str(comment.id))

This module configures where those go and turns on the library
integrations (FastAPI requests, SQL statements, outbound httpx calls).
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import Settings

SERVICE_NAME = "forum-backend"


def _should_send(settings: Settings) -> bool:
    # An explicit setting wins; otherwise send only when a token is present
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Output always goes to the console. It is also shipped to Logfire
    when ``OBSERVABILITY__SEND_TO_LOGFIRE`` is set, or when a token is
    configured and that flag is left unset.
    """
    send = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
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
    """Open a span per request, tagged with method and path."""

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path if hasattr(request, "url") else None,
        }

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Record every SQL statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Record outbound httpx calls, including those made by ``ForumClient``."""
    logfire.instrument_httpx()
