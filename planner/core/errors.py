"""Exception handlers: malformed input is a 400, not FastAPI's default 422."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from planner.core.constants import DUPLICATE_NAME

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    # Only the unique muscle category name can trip this (no FK constraints in the schema)
    logger.info("integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=DUPLICATE_NAME, content={"detail": "Duplicate value"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
