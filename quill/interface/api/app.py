"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quill.config import Settings
from quill.interface.api.routes import auth, blogs, health
from quill.interface.error import register_error_handlers
from quill.util.di.container import create_container, setup_di
from quill.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncIterator[None]:
    yield
    # Disposes the engine and any other APP-scoped resources
    await app_instance.state.dishka_container.close()


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container; the production container when omitted
        settings: Settings for CORS and the production container; loaded
            from the environment when omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Quill API",
        description="Blogging backend: accounts, post lifecycle and published post queries",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container(settings))

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(blogs.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
