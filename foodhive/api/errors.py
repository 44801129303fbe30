# foodhive_api/foodhive/api/errors.py
from __future__ import annotations

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from foodhive.domain.errors import (
    FoodHiveError,
    Forbidden,
    InvalidIdentifier,
    NotAuthenticated,
    PurchaseFailed,
    ValidationFailed,
)

log = logging.getLogger("api.errors")

_STATUS: Dict[Type[FoodHiveError], int] = {
    InvalidIdentifier: status.HTTP_400_BAD_REQUEST,
    NotAuthenticated: status.HTTP_401_UNAUTHORIZED,
    Forbidden: status.HTTP_403_FORBIDDEN,
    ValidationFailed: status.HTTP_422_UNPROCESSABLE_ENTITY,
    PurchaseFailed: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: FoodHiveError) -> int:
    for cls in type(exc).__mro__:
        if cls in _STATUS:
            return _STATUS[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _domain_error(request: Request, exc: FoodHiveError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=code, content={"message": exc.message})


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


async def _store_error(request: Request, exc: PyMongoError) -> JSONResponse:
    log.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Database operation failed"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FoodHiveError, _domain_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(PyMongoError, _store_error)
