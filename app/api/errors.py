"""Maps pipeline errors to HTTP statuses and the {"error": {"message"}} envelope."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.decoder.exceptions import UnreadableDocument, UnsupportedMediaType
from app.generation.exceptions import BackendAuthError, BackendError
from app.logging.logger import Log
from app.processor.exceptions import EmptyPayload, EmptyUpload

ERROR_STATUS: dict[type[Exception], int] = {
    UnsupportedMediaType: 415,
    UnreadableDocument: 422,
    EmptyUpload: 400,
    EmptyPayload: 400,
    BackendAuthError: 401,
    BackendError: 502,
}

INTERNAL_ERROR_MESSAGE = "Failed to generate website"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})


async def _pipeline_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (status for exc_type, status in ERROR_STATUS.items() if isinstance(exc, exc_type)),
        500,
    )
    Log.warning(f"{request.url.path} failed ({status_code}): {exc}")
    return error_response(status_code, str(exc) or INTERNAL_ERROR_MESSAGE)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(400, f"Invalid request: {exc.errors()}")


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"{request.url.path} unhandled error: {exc!r}")
    return error_response(500, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    for exc_type in ERROR_STATUS:
        app.add_exception_handler(exc_type, _pipeline_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
