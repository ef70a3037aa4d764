"""
Main entrypoint for the Order Flow API.

This module assembles the FastAPI application, sets up logging,
registers the error handler for service exceptions and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``::

    uvicorn order_flow_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import init_db
from .core.exceptions import OrderFlowError
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


async def order_flow_error_handler(request: Request, exc: OrderFlowError) -> JSONResponse:
    """Render a service exception as ``{"detail": message}``."""
    logger.info(
        "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers the service exception handler and
    mounts the version 1 routers under ``settings.api_prefix``.
    Tables are created on startup.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_exception_handler(OrderFlowError, order_flow_error_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    return app


# Created at import time so uvicorn can discover it without calling
# create_app manually.
app = create_app()
