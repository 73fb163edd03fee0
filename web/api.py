"""FastAPI web application for the Debate Hall backend."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import get_default_config
from web.dependencies import get_auth_db, get_debate_db
from web.endpoints.auth import router as auth_router
from web.endpoints.debates import router as debates_router
from web.endpoints.system import router as system_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]  # Outputs to console
)

logger: logging.Logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the database schema before serving requests."""
    db = app.dependency_overrides.get(get_debate_db, get_debate_db)()
    app.dependency_overrides.get(get_auth_db, get_auth_db)()
    logger.info(f"Using database at {db.db_path}")

    yield

    logger.info("Debate Hall API shutting down")


def get_allowed_origins() -> list[str] | None:
    """Get CORS origins from configuration, or None for development defaults."""
    origins = get_default_config().server.allowed_origins
    return origins or None


# FastAPI app
app: FastAPI = FastAPI(
    title="Debate Hall",
    description="Structured for/against debates with scoring and XML export",
    version="1.0.0",
    lifespan=lifespan,
)

allowed_origins: list[str] | None = get_allowed_origins()

if allowed_origins:

    logger.info(f"Setting CORS allowed origins: {allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:

    logger.info("No allowed origins configured, using development CORS settings")

    # Development: Allow any localhost/127.0.0.1
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(system_router)
app.include_router(auth_router)
app.include_router(debates_router)
