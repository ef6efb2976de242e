from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class DomainError(Exception):
    """Domain-level exception normalized by the error handlers below."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        code: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.code = code


def _error_body(detail: str, code: str | None = None) -> dict[str, str]:
    body = {"error": detail}
    if code:
        body["code"] = code
    return body


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(_error_body(exc.detail, exc.code), status_code=exc.status_code)


async def _validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # FastAPI answers malformed forms with 422 and a verbose body.
    return JSONResponse(
        _error_body("Invalid input."), status_code=status.HTTP_400_BAD_REQUEST
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)


__all__ = ["DomainError", "install_error_handlers"]
