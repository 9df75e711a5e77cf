# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the jokes app.
# It configures the FastAPI application with exception handlers and routers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from app import views
from app.auth import OptionalUserDep
from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import (
    JokesAppException,
    jokes_app_exception_handler,
    render_error_boundary,
)
from app.routers import health, jokes
from lib.database import Database

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Create missing tables
    - Shutdown: Dispose of the connection pool
    """
    logger.info(f"Starting jokes app in {settings.ENVIRONMENT} mode")
    Database.create_tables()

    yield

    logger.info("Shutting down jokes app")
    Database.get_engine().dispose()


# Create FastAPI application
app = FastAPI(
    title="Jokes App",
    description="Register, log in, post, read and delete short jokes.",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(JokesAppException)
async def handle_jokes_app_exception(request: Request, exc: JokesAppException):
    """Handle custom jokes app exceptions."""
    return await jokes_app_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return render_error_boundary(request)


# =============================================================================
# Routers
# =============================================================================

# Login and logout
app.include_router(
    auth_routes.router,
    tags=["Auth"]
)

# Joke pages
app.include_router(
    jokes.router,
    prefix="/jokes",
    tags=["Jokes"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root(request: Request, user: OptionalUserDep):
    """Home page."""
    return views.render(request, "index.html", {"user": user})
