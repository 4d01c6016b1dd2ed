# app/core/errors.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Erro de aplicação com mensagem legível e, opcionalmente, detalhes."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    """Campos obrigatórios ausentes ou inválidos; detectado antes de qualquer chamada externa."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(AppError):
    """Falha numa chamada ao provedor de cobrança (Asaas)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ReferenceIntegrityError(AppError):
    """Mensalidade aponta para um aluno inexistente."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _body(message: str, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {"message": message}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_body(exc.message, exc.details))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_body("Requisição inválida.", exc.errors()),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
