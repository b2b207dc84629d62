"""
Global exception handlers for consistent API errors.

Todas las respuestas de error comparten la forma `{"message": ..., "request_id": ...}`.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(request: Request, message: Any, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message, **extra}
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("notemanager.errors")

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_body(request, exc.detail or "HTTP error"),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        return JSONResponse(status_code=422, content=_body(request, "Validation error", errors=errors))

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        log.exception("Unhandled error request_id=%s", _req_id(request))
        return JSONResponse(status_code=500, content=_body(request, "Internal server error"))
