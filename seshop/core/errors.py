import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _message(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message},
        headers=headers,
    )


def format_validation_errors(exc: RequestValidationError) -> str:
    """
    Flatten pydantic errors into one line.

    Example:
        "Request validation failed: body.price: Field required, body.name: ..."
    """
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Request validation failed: " + ", ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _message(str(exc.detail), exc.status_code, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Invalid payloads and malformed ids are reported like any other failure.
    message = format_validation_errors(exc)
    logger.info("%s %s -> %s", request.method, request.url.path, message)
    return _message(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return _message(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _message(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Make every error body `{"message": ...}`.

      - HTTPException          -> its own status code
      - RequestValidationError -> 500
      - SQLAlchemyError        -> 500 with the driver message
      - anything else          -> 500 with str(exc)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
