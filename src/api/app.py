"""
FastAPI application factory.

* Registers routes for the beekeeper directory and admin.
* Maps ``InvalidArgument`` from the proximity engine to HTTP 400.
* Releases the DB engine and Redis pool on shutdown.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, beekeepers
from src.domain.entities import InvalidArgument
from src.infrastructure import redis_client
from src.infrastructure.database import engine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Dispose of pooled connections on shutdown."""
    yield
    await redis_client.close_pool()
    await engine.dispose()
    logger.info("Connection pools closed")


async def _invalid_argument_handler(request: Request, exc: InvalidArgument):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Honeypot Beekeeper Directory API",
        description=(
            "Find beekeepers near you.  Ranks the directory by great-circle "
            "distance, applies sidebar filters, and tells the map where to "
            "look."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors
    app.add_exception_handler(InvalidArgument, _invalid_argument_handler)

    # Routers
    app.include_router(beekeepers.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
