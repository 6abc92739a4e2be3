"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Vote saved", target=target.key, value=int(value))

    # Manual spans for operations that call the store
    with logfire.span("remove_thread", thread_id=thread_id):
        ...
"""

import logfire
from fastapi import FastAPI

from board.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "board-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Traces every request with its duration, errors and metadata.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Map request attributes, handling both HTTP and WebSocket requests."""
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    # Bearer tokens must never end up in traces
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Instrument httpx client with Logfire.

    Every call to the store goes through httpx, so this traces store
    latency and failures.
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
