"""
Exception handlers: every failure leaves the API as {"message", "code", "errors"?}.
Request validation becomes 400 with one entry per failing field; storage failures become 500.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError

from educonnect.config import settings
from educonnect.errors import EduConnectError, FieldError, UnexpectedError, ValidationError

logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    # ("body", "courseId") -> "courseId"; ("query", "limit") -> "limit"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def request_validation_to_error(exc: RequestValidationError) -> ValidationError:
    errors = [FieldError(_field_name(tuple(e.get("loc", ()))), e.get("msg", "Invalid value")) for e in exc.errors()]
    return ValidationError(errors)


async def handle_app_error(request: Request, exc: EduConnectError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload(), headers=exc.headers)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing failures (unknown path, wrong method) and any HTTPException raised by dependencies
    codes = {401: "unauthenticated", 403: "forbidden", 404: "not_found", 405: "method_not_allowed"}
    content = {"message": str(exc.detail), "code": codes.get(exc.status_code, "http_error")}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = request_validation_to_error(exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=err.to_payload())


async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("%s %s: storage failure", request.method, request.url.path)
    message = "Unexpected storage failure. Please retry."
    if settings.debug:
        message = f"Unexpected storage failure: {type(exc).__name__}: {exc}"
    err = UnexpectedError(message)
    return JSONResponse(status_code=err.status_code, content=err.to_payload())


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s: unhandled error", request.method, request.url.path)
    err = UnexpectedError("Unexpected server error")
    return JSONResponse(status_code=err.status_code, content=err.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EduConnectError, handle_app_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(Exception, handle_unexpected)
