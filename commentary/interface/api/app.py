"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from commentary.config import Settings
from commentary.interface.api.errors import register_error_handlers
from commentary.interface.api.routes import (
    comments,
    health,
    likes,
    moderation,
    reports,
)
from commentary.util.di.container import create_container, setup_di
from commentary.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application without a DI container.

    Logfire should be configured before calling this function
    (start_app.py in production, conftest.py in tests).
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Commentary API",
        description="Nested comments and moderation queue for published posts",
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
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(reports.router)
    app_instance.include_router(moderation.router)

    return app_instance


def create_prod_app() -> FastAPI:
    """Create the application wired to the production container."""
    app_instance = create_app()
    setup_di(app_instance, create_container())
    return app_instance


# Create app instance for uvicorn
app = create_prod_app()
