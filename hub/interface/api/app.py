"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hub.config import Settings
from hub.interface.api.errors import register_error_handlers
from hub.interface.api.middleware import UploadSizeLimitMiddleware
from hub.interface.api.request import client_ip
from hub.interface.api.routes import (
    auth,
    comments,
    discussions,
    groups,
    health,
    invitations,
    papers,
)
from hub.util.di.container import build_container
from hub.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the DI container on shutdown, disposing the database pool."""
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default.
            Tests pass a container built from mock providers.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Research Hub API",
        description="Backend API for Research Hub - academic groups sharing papers and discussions",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance, client_address=client_ip)

    # Added first so CORS headers also reach its rejections
    app_instance.add_middleware(
        UploadSizeLimitMiddleware, max_bytes=settings.uploads.max_bytes
    )

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Content-Disposition"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_dishka(container or build_container(), app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    # Literal /groups/accept-invitation path must precede /groups/{group_id}
    app_instance.include_router(invitations.router)
    app_instance.include_router(groups.router)
    app_instance.include_router(discussions.group_router)
    app_instance.include_router(discussions.router)
    app_instance.include_router(papers.group_router)
    app_instance.include_router(papers.router)
    app_instance.include_router(comments.router)

    register_error_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
