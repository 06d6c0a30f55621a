"""Преобразование ошибок в HTTP-ответы вида {"error": "..."}."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docker_webui_api.api.schemas import ErrorResponse
from docker_webui_api.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)


def bad_request(message: str) -> HTTPException:
    """Ошибка 400 для отсутствующих обязательных полей."""

    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def engine_failure(message: str, exc: DockerAPIError) -> HTTPException:
    """Логирует сбой Docker Engine и возвращает обобщённую ошибку 500."""

    LOGGER.error("%s: %s | context=%s", message, exc, exc.context)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail or "Unknown error")).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    LOGGER.warning(
        "Invalid request body for %s %s: %s",
        request.method,
        request.url.path,
        jsonable_encoder(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="Invalid request body").model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled error for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Подключает обработчики ошибок к приложению."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
