"""Conversion of failures into JSON responses.

Every failure that reaches the application boundary is answered with the
envelope ``{"error": {"message": ..., "status": ...}}``. Authentication
failures are the exception: they are answered as ``{"message": ...}`` with
status 401.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .auth import AuthenticationError


def error_status(exc: Exception) -> int:
    """Status carried by ``exc``, or 500 when it carries none."""
    for attr in ("status", "status_code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return 500


def error_envelope(message: str, status: int) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": {"message": message, "status": status}}
    )


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_envelope(str(exc.detail), exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON bodies surface here as a "json_invalid" error
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_envelope(message, 400)


async def format_unhandled_errors(request: Request, call_next):
    """HTTP middleware turning any exception that escapes the app into the envelope.

    Installed beneath the CORS middleware so error responses carry CORS headers.
    The exception is answered here and not re-raised to the server.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return error_envelope(str(exc), error_status(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``; call before adding the CORS middleware."""
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.middleware("http")(format_unhandled_errors)
