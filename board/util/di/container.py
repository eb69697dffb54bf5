"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production provider:
    PostgreSQL persistence with the LISTEN/NOTIFY change feed, webhook
    notification and delivery channels, and the local video store.

    Returns:
        Container with production providers
    """
    providers = [get_provider(base, use_mock=False) for base in PROVIDERS]
    logfire.debug(
        "Building DI container", providers=[p.__name__ for p in providers]
    )
    return make_async_container(*(p() for p in providers), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app.

    Routes resolve ``FromDishka`` dependencies from a request scope of the
    container. The lifespan reaches APP-scoped singletons such as the
    board reconciler through ``app.state.dishka_container``.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
