"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from mealmate.api.errors import register_error_handlers
from mealmate.api.meal_requests import router as meal_requests_router
from mealmate.api.meals import router as meals_router
from mealmate.api.payments import router as payments_router
from mealmate.api.reviews import router as reviews_router
from mealmate.api.users import router as users_router
from mealmate.app_logging import configure_logging
from mealmate.config import parse_cors_origins
from mealmate.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await app.state.container.prepare_resources()
        except Exception:
            logger.exception("Failed to prepare database resources")
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="MealMate API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(meals_router)
    app.include_router(users_router)
    app.include_router(meal_requests_router)
    app.include_router(reviews_router)
    app.include_router(payments_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Server is running..."

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
