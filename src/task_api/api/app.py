"""FastAPI application for the task_api service.

This module creates and configures the FastAPI application instance
with its middleware, routes and error handlers.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..auth import TokenVerifier
from ..config import Settings
from ..database import check_db_connection, open_database
from ..errors import register_error_handlers
from ..routes.task_routes import task_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit ``Settings`` object."""
    if settings is None:
        settings = Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        with open_database(settings) as database:
            app.state.database = database
            app.state.token_verifier = TokenVerifier(settings.jwt_secret)
            logger.info(f"task_api started (env={settings.app_env})")
            try:
                yield
            finally:
                del app.state.token_verifier
                del app.state.database

    app = FastAPI(
        title="Task API",
        description="Minimal task-tracking API",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings

    register_error_handlers(app)

    # Outermost layer; any origin may call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(task_router)

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint."""
        if check_db_connection(request.app.state.database):
            return {"status": "healthy"}
        return JSONResponse(status_code=503, content={"status": "unhealthy"})

    return app


app = create_app()
