"""Health Check Controller."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from apps.users.presentation.http.schemas.common import HealthResponse, ReadinessResponse
from apps.users.setup.constants import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """서비스 상태 확인."""
    return HealthResponse(status="healthy", service=SERVICE_NAME, version=SERVICE_VERSION)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(request: Request):
    """DB 연결 확인. memory 백엔드는 항상 ready."""
    database = getattr(request.app.state, "database", None)
    if database is not None and not await database.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ReadinessResponse(status="unavailable").model_dump(),
        )
    return ReadinessResponse(status="ready")


@router.get("/ping")
async def ping() -> dict:
    """간단한 ping 엔드포인트."""
    return {"ping": "pong"}
