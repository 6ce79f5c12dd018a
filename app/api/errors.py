"""One error envelope for every endpoint: {"error": ..., "details"?: ...}."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.cors import CORS_HEADERS

logger = logging.getLogger(__name__)


def error_body(error: str, details: str | None = None) -> dict:
    body = {"error": error}
    if details:
        body["details"] = details
    return body


def store_error(error: str, exc: Exception) -> dict:
    """HTTPException detail for a failed store call, keeps the driver message."""
    orig = getattr(exc, "orig", None)
    return error_body(error, str(orig or exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        content = error_body("Method not allowed")
    elif isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = error_body(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    return JSONResponse(status_code=400, content=error_body("Invalid request body", details))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    # raised past CORSMiddleware, so the headers are added here
    return JSONResponse(status_code=500, content=error_body("Internal server error"), headers=CORS_HEADERS)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
