"""Translate ``CommerceError`` into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from commerce.errors import HTTP_STATUS_CODES, CommerceError


async def commerce_error_handler(request: Request, exc: CommerceError) -> JSONResponse:
    """Map the error kind to a status code; the body carries kind, message and context."""
    return JSONResponse(
        status_code=HTTP_STATUS_CODES.get(exc.kind, 500),
        content=exc.to_dict(),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CommerceError, commerce_error_handler)
