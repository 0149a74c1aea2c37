"""FastAPI application for the pt-manager web API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from .. import __version__
from ..errors import ValidationError
from ..store.state import TrainerState
from .routers import calendar, customers, stats, trainings

logger = logging.getLogger(__name__)


def create_app(state: TrainerState | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each app owns one in-memory TrainerState, seeded with the sample records
    unless one is passed in.
    """
    app = FastAPI(
        title="pt-manager",
        description="Customer and training-session manager for personal trainers",
        version=__version__,
    )

    app.state.trainer = state if state is not None else TrainerState.seeded()

    # Include routers
    app.include_router(customers.router)
    app.include_router(trainings.router)
    app.include_router(calendar.router)
    app.include_router(stats.router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/")
    async def root():
        """Root redirect to the customer list."""
        return RedirectResponse(url="/customers", status_code=302)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
