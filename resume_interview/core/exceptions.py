"""
Custom exceptions for the resume interview practice application.

This module defines a hierarchy of exceptions to provide specific error handling
and better error messages throughout the application.
"""
import logging
from typing import Optional
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exception Classes
# ============================================================================

class AppError(Exception):
    """Base exception for all application errors."""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        """Short error name exposed to clients (class name without the Error suffix)."""
        name = type(self).__name__
        return name[:-len("Error")] if name.endswith("Error") else name


class UnsupportedFormatError(AppError):
    """Exception raised when an upload has a MIME type no extractor handles."""

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type}", details={"mime_type": mime_type})


class ParseFailureError(AppError):
    """Exception raised when a format-specific parser fails."""

    def __init__(self, format_name: str, cause: Exception):
        self.format_name = format_name
        self.cause = cause
        super().__init__(
            f"Failed to parse {format_name} file: {cause}",
            details={"format": format_name},
        )


class EmptyContentError(AppError):
    """Exception raised when extraction yields nothing but whitespace."""

    def __init__(self, message: str = "No text could be extracted from the file"):
        super().__init__(message)


class InvalidAnalysisFormatError(AppError):
    """Exception raised when the AI reply does not match the analysis schema."""
    status_code = 502


class NetworkFailureError(AppError):
    """Exception raised when a call to the backend or the AI provider fails."""
    status_code = 502


class ConfigurationError(AppError):
    """Exception raised when configuration is invalid or missing."""
    pass


class ResumeFileError(AppError):
    """Exception raised when the local resume file cannot be read."""
    status_code = 400


class DatabaseConnectionError(AppError):
    """Exception raised when the document database cannot be reached."""
    status_code = 503


class RecordNotFoundError(AppError):
    """Exception raised when a referenced resume, session or question does not exist."""
    status_code = 404


class InvalidIdentifierError(AppError):
    """Exception raised when a record identifier is not a valid ObjectId."""
    status_code = 400


class NoResumeError(AppError):
    """Exception raised when interview practice starts before any resume was uploaded."""
    status_code = 404


# ============================================================================
# FastAPI Exception Handlers
# ============================================================================

async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{exc.kind} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.kind} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "kind": exc.kind, "details": exc.details},
    )

async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error", "error": str(exc)},
    )

async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(f"HTTP exception: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
