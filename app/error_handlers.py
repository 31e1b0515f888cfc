from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from domain.errors import CareerLiftError

logger = logging.getLogger(__name__)


def attach_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CareerLiftError)
    async def _careerlift(request: Request, exc: CareerLiftError):
        if exc.status_code >= 500:
            logger.error("%s %s failed (%s): %s", request.method,
                         request.url.path, exc.kind, exc.detail or exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body.",
                     "details": jsonable_encoder(exc.errors()), "kind": "invalid_input"},
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled: %s", exc)
        return JSONResponse(status_code=500, content={
            "error": "Internal Server Error", "details": str(exc), "kind": "internal_error"})
