from http import HTTPStatus
from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def build_error_body(status_code: int, errors: list[str]) -> dict[str, Any]:
    """Structured error body: status, reason phrase and the list of details."""
    try:
        message = HTTPStatus(status_code).phrase
    except ValueError:
        message = 'Error'
    return {'status': status_code, 'message': message, 'errors': errors}


def _error_response(status_code: int, errors: list[str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=build_error_body(status_code, errors))


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return _error_response(error.status_code, error.errors)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, StarletteHTTPException):
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ['Internal server error'])
    return _error_response(exc.status_code, [str(exc.detail)])


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, [str(exc)])


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    details = [
        f'{".".join(str(part) for part in err.get("loc", ()))}: {err.get("msg", "")}'
        for err in error.errors()
    ]
    return _error_response(status.HTTP_400_BAD_REQUEST, details)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ['Internal server error'])


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    StarletteHTTPException: http_exception_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
