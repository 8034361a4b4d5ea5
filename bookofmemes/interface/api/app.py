"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookofmemes.config import Settings
from bookofmemes.interface.api.routes import (
    bookmarks,
    comments,
    feeds,
    follow,
    health,
    interactions,
    stories,
    users,
    votes,
    wallet_transactions,
)
from bookofmemes.interface.error import register_error_handlers
from bookofmemes.util.di.container import create_container, setup_di
from bookofmemes.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Book of Memes API",
        description="Backend API for Book of Memes - stories, memes, puzzles and the conversations around them",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials="*" not in settings.cors.allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(bookmarks.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(feeds.router)
    app_instance.include_router(interactions.router)
    app_instance.include_router(follow.router)
    app_instance.include_router(users.router)
    app_instance.include_router(stories.router)
    app_instance.include_router(wallet_transactions.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
