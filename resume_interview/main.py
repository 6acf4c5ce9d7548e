import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from resume_interview.api.routes import api_router
from resume_interview.core.config import Settings, get_settings
from resume_interview.core.exceptions import (
    AppError, app_error_handler, global_exception_handler, http_exception_handler
)
from resume_interview.core.logger import set_correlation_id, setup_logger
from resume_interview.db import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    owns_database = app.state.database is None
    if owns_database:
        # Missing MONGODB_URI / GEMINI_API_KEY or an unreachable server aborts startup
        settings: Settings = app.state.settings or get_settings()
        setup_logger(
            log_level=logging.DEBUG if settings.DEBUG_MODE else logging.INFO,
            clear_log=True,
            use_json=settings.LOG_JSON,
        )
        app.state.settings = settings
        app.state.database = await Database(settings.MONGODB_URI, settings.MONGODB_DATABASE).connect()

    logger.info("Application startup: Resume Interview Practice API")
    yield

    if owns_database:
        app.state.database.close()
        app.state.database = None
    logger.info("Application shutdown")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment at startup when omitted.
        database: An already-connected Database. When given, the lifespan neither
                  connects nor closes it.
    """
    app = FastAPI(
        title="Resume Interview Practice",
        description="Resume text extraction and interview practice records.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next):
        correlation_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        set_correlation_id(correlation_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = correlation_id
        return response

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health(request: Request):
        database: Optional[Database] = request.app.state.database
        return {"status": "ok", "database": bool(database and await database.ping())}

    return app


app = create_app()


def run():
    """Console entry point: serve the API with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run("resume_interview.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
