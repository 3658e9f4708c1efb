"""
HTTP plumbing shared by all endpoints.

* Every response carries wildcard CORS headers; ``OPTIONS`` requests to
  any path are answered with ``204 No Content`` and those headers only.
* Errors are rendered as ``{"message": "..."}``.  Unknown routes and
  unsupported methods both map to ``404 Not found``.
* Any exception escaping a handler is logged and turned into a generic
  ``500`` so a single bad request never takes the server down.
* Request bodies are read leniently: empty or malformed JSON, or JSON
  that is not an object, is treated as an empty object so that the
  usual "missing fields" validation applies.
"""

import json
import logging
from typing import Any, Dict, Type, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

MISSING_FIELDS = "Missing required fields"
INVALID_FIELDS = "Invalid field values"

# Error types pydantic reports for absent or empty values.
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": "GET,POST,PATCH,DELETE,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def validation_message(errors: list) -> str:
    """Pick the client message for a list of pydantic error dicts."""
    if any(err.get("type") in _MISSING_ERROR_TYPES for err in errors):
        return MISSING_FIELDS
    return INVALID_FIELDS


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict, or ``{}`` if it is not one."""
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


async def parse_body(request: Request, model: Type[ModelT]) -> ModelT:
    """Validate the request body against ``model``.

    Raises an ``HTTPException`` (400) whose message tells whether fields
    were missing or only had invalid values.
    """
    payload = await read_json_object(request)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=validation_message(exc.errors()),
        ) from exc


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing failures come from Starlette with its own wording.
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED or exc.detail == "Not Found":
        return error_response(status.HTTP_404_NOT_FOUND, "Not found")
    return error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc.errors()))


async def cors_and_error_middleware(request: Request, call_next) -> Response:
    if request.method == "OPTIONS":
        response: Response = Response(status_code=status.HTTP_204_NO_CONTENT)
    else:
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unexpected server error on %s %s", request.method, request.url.path)
            response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
    response.headers.update(cors_headers())
    return response


def install_http_handlers(app: FastAPI) -> None:
    """Register the error handlers and the CORS/error middleware on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.middleware("http")(cors_and_error_middleware)
