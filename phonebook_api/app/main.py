"""
Main entrypoint for the Phonebook API.

This module assembles the FastAPI application: it sets up logging,
installs the CORS and access logging middleware, registers the error
handler for malformed request bodies and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn phonebook_api.app.main:app --port 3001

Each application owns exactly one ``PersonDirectory`` stored on
``app.state.directory``.  Pass a directory to ``create_app`` to start
from a different data set.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.request_logging import register_request_logging
from .services.person_service import PersonDirectory

logger = logging.getLogger(__name__)


async def malformed_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer unparsable or mistyped request bodies with HTTP 400."""
    logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "malformed request body"},
    )


def create_app(directory: Optional[PersonDirectory] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    directory : Optional[PersonDirectory]
        Contact directory served by the app.  A new directory holding
        the seed entries is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None, settings.access_log)

    # Routes register both slash forms themselves, so no redirects.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        redirect_slashes=False,
    )
    app.state.directory = directory if directory is not None else PersonDirectory()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(app)
    app.add_exception_handler(RequestValidationError, malformed_body_handler)

    app.include_router(router)

    logger.debug("Application created with %d people", app.state.directory.count())
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
