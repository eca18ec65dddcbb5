"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from movieworld.api.errors import register_exception_handlers
from movieworld.api.routes import health, movies
from movieworld.config import settings
from movieworld.database import engine

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/movieworld"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.service_name} starting")
    logger.info(f"Movie Review service at {settings.movie_review_service_url}")

    yield

    # Shutdown: release pooled database connections
    await engine.dispose()
    logger.info(f"{settings.service_name} shut down")


# Create FastAPI app
app = FastAPI(
    title="MovieWorld API",
    description="Movie catalogue with reviews from the Movie Review service",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Health must be registered before the /{movie_id} routes
app.include_router(health.router, prefix=API_PREFIX)
app.include_router(movies.router, prefix=API_PREFIX, tags=["movies"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("movieworld.main:app", host=settings.api_host, port=settings.api_port)
