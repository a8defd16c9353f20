"""
Error translation for the HTTP layer.

Every failure leaves the service as ``{"error": <message>}``:
- request body problems -> 400 with the first validation message
- an unparsable ``{id}`` path segment -> 404 (it can never match a row)
- storage failures and rejected list queries -> 500 with the driver message
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from squads_service.db.listing import InvalidQueryError

logger = logging.getLogger(__name__)

NOT_FOUND = "not found"
MULTISIG_NOT_FOUND = "multisig not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    msg = first.get("msg", "invalid value")
    if loc:
        return f"{'.'.join(loc)}: {msg}"
    return msg


def storage_error_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        {"error": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors and all(tuple(err.get("loc") or ("",))[0] == "path" for err in errors):
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    return error_response(status.HTTP_400_BAD_REQUEST, format_validation_error(exc))


async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    message = storage_error_message(exc)
    logger.error("storage_error method=%s path=%s error=%s", request.method, request.url.path, message)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


async def invalid_query_handler(request: Request, exc: InvalidQueryError):
    logger.warning("invalid_list_query path=%s error=%s", request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(InvalidQueryError, invalid_query_handler)
