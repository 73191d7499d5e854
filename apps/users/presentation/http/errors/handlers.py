"""Exception Handlers.

라우터는 예외 처리 보일러플레이트 없이 Use Case를 호출하고,
여기서 DomainError를 HTTP 응답으로 변환합니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from apps.users.domain.exceptions import DomainError
from apps.users.presentation.http.errors.translators import translate_domain_error
from apps.users.presentation.http.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = translate_domain_error(exc)
    if status_code >= 500:
        logger.error(
            "Domain error",
            extra={"path": request.url.path, "error_kind": exc.kind.value, "error": exc.message},
        )
    body = ErrorResponse(detail=exc.message, code=exc.kind.value, field=exc.field)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Internal error", extra={"path": request.url.path})
    body = ErrorResponse(detail="Internal server error", code="internal_error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
