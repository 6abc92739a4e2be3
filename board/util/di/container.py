"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (store over HTTP, media in the bucket).

    Settings are loaded from environment variables automatically. Missing
    store or bucket credentials do not stop the container from building;
    the affected endpoints answer with a configuration error instead.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI application.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
