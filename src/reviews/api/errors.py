"""Exception handlers that render every failure as ``{"success": false, "error": ...}``.

Status codes:
    404  the shop domain or review does not resolve
    400  the request is malformed (missing header, bad body, invalid values)
    500  anything else, including document store failures
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ProteanException, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from reviews.utils.logging import get_logger

logger = get_logger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _join(messages) -> str:
    if isinstance(messages, (list, tuple)):
        return ", ".join(str(m) for m in messages)
    return str(messages)


def _messages_of(exc: ProteanException):
    # ObjectNotFoundError carries its payload in args, ValidationError in messages
    if hasattr(exc, "messages"):
        return exc.messages
    return exc.args[0] if exc.args else str(exc)


def describe(exc: ProteanException, with_fields: bool = True) -> str:
    """Flatten Protean's ``{field: [messages]}`` into one line."""
    messages = _messages_of(exc)
    if not isinstance(messages, dict):
        return _join(messages)
    parts = []
    for field, field_messages in messages.items():
        text = _join(field_messages)
        parts.append(f"{field}: {text}" if with_fields and not field.startswith("_") else text)
    return "; ".join(parts)


def describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def object_not_found_handler(request: Request, exc: ObjectNotFoundError):
    return error_response(404, describe(exc, with_fields=False))


async def validation_error_handler(request: Request, exc: ValidationError):
    return error_response(400, describe(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, describe_request_errors(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("request_failed", method=request.method, path=request.url.path)
    return error_response(500, str(exc) or exc.__class__.__name__)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ObjectNotFoundError, object_not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
