"""
MedRoute API

HTTP front for the complaint routing core.

Endpoints:
    POST /recommendations             - Full routing recommendation + hash
    POST /analysis                    - Legal analysis only
    GET  /agencies                    - Agency directory
    GET  /agencies/{id}               - One agency
    GET  /agencies/jurisdiction/{t}   - Agencies handling an issue type
    GET  /states                      - Brazilian states
    GET  /health                      - Liveness probe

The agency directory is loaded and validated in the lifespan handler. A
broken directory raises there, so the app never starts serving requests.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..directory import AgencyDirectory, load_directory
from ..engine import ComplaintPipeline
from ..exceptions import InvalidComplaintError, MedRouteError
from . import config
from .log import configure_logging
from .routes import agencies, recommendations
from .schemas import HealthResponse

logger = logging.getLogger(__name__)


def create_app(
    directory: Optional[AgencyDirectory] = None,
    directory_path: Optional[Union[str, Path]] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        directory: Pre-built directory (tests inject one); loaded at startup if None
        directory_path: File to load when no directory is given
            (defaults to MR_DIRECTORY_PATH)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the agency directory before serving requests."""
        configure_logging(config.log_level())

        loaded = directory
        if loaded is None:
            path = directory_path or config.MR_DIRECTORY_PATH
            try:
                loaded = load_directory(path)
            except MedRouteError as e:
                logger.critical(
                    "Agency directory rejected, refusing to start: %s", e,
                    extra={"error_code": e.code},
                )
                raise

        app.state.directory = loaded
        app.state.pipeline = ComplaintPipeline(loaded)
        logger.info("MedRoute ready with %d agencies", len(loaded))

        yield

        logger.info("Shutting down")

    app = FastAPI(
        title="MedRoute API",
        description=(
            "Medication-access complaint routing: legal analysis, agency "
            "routing and an ordered action plan."
        ),
        version=__version__,
        docs_url="/docs" if config.MR_DOCS_ENABLED else None,
        redoc_url="/redoc" if config.MR_DOCS_ENABLED else None,
        openapi_url="/openapi.json" if config.MR_DOCS_ENABLED else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.MR_CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidComplaintError, invalid_complaint_handler)
    app.add_exception_handler(MedRouteError, medroute_error_handler)

    app.include_router(recommendations.router)
    app.include_router(agencies.router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health(request: Request):
        """Health check endpoint."""
        return HealthResponse(
            healthy=True,
            version=__version__,
            agencies_loaded=len(request.app.state.directory),
        )

    return app


# =============================================================================
# Exception Handlers
# =============================================================================

async def invalid_complaint_handler(request: Request, exc: InvalidComplaintError) -> JSONResponse:
    """The citizen's input was invalid."""
    logger.info(
        "Invalid complaint: %s", exc.message,
        extra={"error_code": exc.code},
    )
    return JSONResponse(status_code=422, content=exc.to_dict())


async def medroute_error_handler(request: Request, exc: MedRouteError) -> JSONResponse:
    """The system is misconfigured or failed internally."""
    logger.error(
        "Request failed: %s", exc,
        extra={"error_code": exc.code},
    )
    return JSONResponse(status_code=500, content=exc.to_dict())


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
