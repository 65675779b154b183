"""
Main entrypoint for the Clinical Concepts API.

This module assembles the FastAPI application: it sets up logging,
composes the store and catalog service, installs CORS and the error
mapping, and includes the API router under ``/api``.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn clinical_concepts_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path, init_db
from .core.errors import CatalogError, ValidationError
from .core.logging_config import setup_logging
from .services.catalog_service import CatalogService
from .services.concept_store import ConceptStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app from.  Defaults to the module‑level
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The composed
        ``CatalogService`` is available as ``app.state.catalog_service``.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the code below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    db_path = get_database_path(settings.database_url)
    store = ConceptStore(db_path, timeout=settings.db_timeout)
    app.state.settings = settings
    app.state.catalog_service = CatalogService(store, csv_resource=settings.csv_resource)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        return PlainTextResponse("Invalid request", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> PlainTextResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed; the seed set is loaded
        # before the server starts accepting requests.
        init_db(db_path, timeout=settings.db_timeout)
        if settings.load_seed_on_startup:
            app.state.catalog_service.load_seed_set()
            logger.info("Application started and data loaded.")
        else:
            logger.info("Application started.")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
