"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.errors import register_error_handlers
from forum.interface.api.routes import comments, groups, health, likes, posts
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production ``scripts/start_app.py`` does it.

    Args:
        container: DI container to use; the production container if None
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Campus Forum API",
        description="Groups, posts and threaded discussions for the campus forum",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(groups.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)

    return app_instance


# App instance for uvicorn. Logfire must be configured before this module is
# imported (start_app.py handles this).
app = create_app()
