# vibespecs/api/errors.py
"""
Error -> HTTP mapping. Every VibeSpecsError carries its own status code.
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from vibespecs.core.exceptions import VibeSpecsError
from vibespecs.core.logging import log


async def vibespecs_error_handler(request: Request, exc: VibeSpecsError) -> JSONResponse:
    if exc.status_code >= 500:
        log("API", f"{request.method} {request.url.path} -> {exc.status_code} {type(exc).__name__}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "error": type(exc).__name__,
            "details": jsonable_encoder(exc.details),
        },
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid input", "errors": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VibeSpecsError, vibespecs_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
