"""
Tradução de exceções para respostas JSON `{"error": "<mensagem>"}`.

- DomainError            → status do próprio erro (400/404/409)
- pydantic ValidationError → 400 com a primeira mensagem legível
- APIException (DRF)     → tratamento padrão do DRF
- demais                 → 500 com a mensagem original
"""
from __future__ import annotations

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from clinica_core.core.domain.exceptions import DomainError

logger = structlog.get_logger(__name__)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        msg = err["msg"].removeprefix("Value error, ")
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def domain_exception_handler(exc, context):
    view = type(context.get("view")).__name__ if context.get("view") else None

    if isinstance(exc, DomainError):
        logger.warning(
            "api.domain_error",
            view=view,
            error_type=type(exc).__name__,
            error=exc.message,
            status=exc.status_code,
        )
        return Response({"error": exc.message}, status=exc.status_code)

    if isinstance(exc, ValidationError):
        message = _validation_message(exc)
        logger.warning("api.invalid_payload", view=view, error=message)
        return Response({"error": message}, status=status.HTTP_400_BAD_REQUEST)

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    logger.error("api.unexpected_error", view=view, error=str(exc), exc_info=exc)
    return Response({"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
