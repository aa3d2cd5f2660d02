"""
Main entrypoint for the Ukrainian Learning API.

This module assembles the FastAPI application, sets up logging,
builds the in-memory store and the translation gateway, and includes
the versioned routers.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn ukrainian_learning_api.app.main:app --reload

The store and the gateway are attached to ``app.state`` and handed to
handlers through dependencies, so tests can build an app around their
own instances.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_storage
from .core.storage import MemStorage
from .services.translation_service import TranslationService


logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed requests with HTTP 400 and a generic message."""
    logger.info("Rejected invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid request data"})


def create_app(
    storage: Optional[MemStorage] = None,
    translation_service: Optional[TranslationService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[MemStorage]
        Store to serve.  When omitted a new one is created and, unless
        ``SEED_DATA`` is disabled, filled with the sample content.
    translation_service : Optional[TranslationService]
        Gateway for ``POST /api/translate``.  Defaults to one that reads
        the provider credential from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    if storage is None:
        storage = MemStorage()
        if settings.seed_data:
            seed_storage(storage)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.storage = storage
    app.state.translation_service = translation_service or TranslationService()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # The web client calls the unversioned ``/api`` paths; ``/api/v1``
    # exposes the same routes for versioned consumers.
    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that ASGI servers
# can locate it as ``ukrainian_learning_api.app.main:app``.
app = create_app()
