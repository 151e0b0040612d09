"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.routes import (
    health,
    posts,
    replies,
    solutions,
    stats,
    users,
    votes,
)
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi

API_PREFIX = "/api"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function
    (scripts/start_app.py does so).

    Args:
        container: DI container to serve requests from (production container
            when omitted)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Forum API",
        description="Backend API for a discussion forum with threaded replies, votes and accepted solutions",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(users.router, prefix=API_PREFIX)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(replies.router, prefix=API_PREFIX)
    app_instance.include_router(votes.router, prefix=API_PREFIX)
    app_instance.include_router(solutions.router, prefix=API_PREFIX)
    app_instance.include_router(stats.router, prefix=API_PREFIX)

    return app_instance
