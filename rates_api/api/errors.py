"""Request-level errors and their JSON rendering."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

GENERIC_FAILURE_MESSAGE = "Unknown error has occurred"


class ApiError(Exception):
    """An error reported to the client as ``{"error": message}``."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidParameterError(ApiError):
    """A query parameter is missing or malformed."""


class UnknownCurrencyError(ApiError):
    """The requested currency code is not part of the current rates."""

    def __init__(self, code: str) -> None:
        super().__init__("Provided code is not valid")
        self.code = code


class ServiceFailure(ApiError):
    """Rates could not be produced; details stay in the server log."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self) -> None:
        super().__init__(GENERIC_FAILURE_MESSAGE)


async def _render_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _render_api_error)  # type: ignore[arg-type]


__all__ = [
    "ApiError",
    "GENERIC_FAILURE_MESSAGE",
    "InvalidParameterError",
    "ServiceFailure",
    "UnknownCurrencyError",
    "register_error_handlers",
]
