"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from kanobug import __version__
from kanobug.config import get_settings
from kanobug.logging_config import configure_logging
from kanobug.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Kanobug",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for load balancers and local development."""
    return {
        "status": "ok",
        "service": "kanobug",
        "version": __version__,
    }
