"""Common HTTP Schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health Check 응답."""

    status: str = Field(default="healthy", description="서비스 상태")
    service: str = Field(..., description="서비스 이름")
    version: str = Field(..., description="API 버전")


class ReadinessResponse(BaseModel):
    """Readiness 응답."""

    status: str = Field(..., description="ready | unavailable")


class ErrorResponse(BaseModel):
    """에러 응답."""

    detail: str = Field(..., description="에러 메시지")
    code: str | None = Field(None, description="에러 코드 (DomainError.kind)")
    field: str | None = Field(None, description="오류가 발생한 필드")
