"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from diet_planner.api.auth import router as auth_router
from diet_planner.api.barcodes import router as barcodes_router
from diet_planner.api.foods import router as foods_router
from diet_planner.api.meal_lists import router as meal_lists_router
from diet_planner.api.open_food_facts import router as open_food_facts_router
from diet_planner.app_logging import configure_logging
from diet_planner.containers import AppContainer
from diet_planner.errors import DietPlannerError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Diet Planner", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(DietPlannerError)
    async def handle_domain_error(
        request: Request, exc: DietPlannerError
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            logger.info(
                "%s %s rejected (%s): %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc,
            )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    app.include_router(auth_router)
    app.include_router(foods_router)
    app.include_router(barcodes_router)
    app.include_router(open_food_facts_router)
    app.include_router(meal_lists_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
