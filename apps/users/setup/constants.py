"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# =============================================================================
# Service Identity
# =============================================================================

SERVICE_NAME = "users-api"
SERVICE_VERSION = "1.0.0"

API_PREFIX = "/api/v1"

# =============================================================================
# Logging Constants
# =============================================================================

ECS_VERSION = "8.11.0"

# 로그 레코드에서 제외할 기본 속성
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# 노이즈가 많은 로거 목록 (레벨 조정 대상)
NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "sqlalchemy.engine",
    "httpx",
    "httpcore",
    "asyncio",
)

# =============================================================================
# PII Masking
# =============================================================================

# 값을 마스킹할 라벨 키
PII_FIELD_NAMES = frozenset({"email"})
MASK_PLACEHOLDER = "***REDACTED***"
# 이메일 로컬 파트에서 남길 글자 수
EMAIL_MASK_VISIBLE_CHARS = 1
