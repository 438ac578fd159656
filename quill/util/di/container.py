"""Dependency injection container."""

from typing import Optional

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from quill.config import Settings
from quill.util.di import PROVIDERS, get_provider


def create_container(settings: Optional[Settings] = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Settings to wire in; loaded from the environment when omitted

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *provider_instances,
        # FastapiProvider exposes the current Request to request-scoped providers
        FastapiProvider(),
        context={Settings: settings or Settings()},
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so DishkaRoute handlers can resolve from it."""
    setup_dishka(container, app)
