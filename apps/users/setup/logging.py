"""
Structured Logging Configuration (ECS-based)

- json: Elastic Common Schema 형식 (수집기 친화적)
- text: 로컬 개발용 한 줄 포맷

두 포맷 모두 출력 직전에 사용자 이메일을 가립니다 (j***@example.com).
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any

from apps.users.setup.constants import (
    ECS_VERSION,
    EMAIL_MASK_VISIBLE_CHARS,
    EXCLUDED_LOG_RECORD_ATTRS,
    MASK_PLACEHOLDER,
    NOISY_LOGGERS,
    PII_FIELD_NAMES,
    SERVICE_NAME,
    SERVICE_VERSION,
)

# =============================================================================
# PII 마스킹
# =============================================================================

_EMAIL_CHAR = r"[^\s@'\"<>(),;:]"
_EMAIL_IN_TEXT = re.compile(
    rf"({_EMAIL_CHAR}{{{EMAIL_MASK_VISIBLE_CHARS}}}){_EMAIL_CHAR}*@({_EMAIL_CHAR}+\.{_EMAIL_CHAR}+)"
)


def mask_email(text: str) -> str:
    """문자열 안의 이메일 주소를 로컬 파트 첫 글자와 도메인만 남기고 가립니다."""
    return _EMAIL_IN_TEXT.sub(r"\1***@\2", text)


def _mask_label(key: str, value: Any) -> Any:
    if key.lower() in PII_FIELD_NAMES:
        text = str(value)
        masked = mask_email(text)
        return masked if masked != text else MASK_PLACEHOLDER
    return mask_sensitive_data(value)


def mask_sensitive_data(data: Any) -> Any:
    """로그 라벨을 재귀적으로 순회하며 이메일을 가립니다.

    - ``email`` 키: 값 전체를 마스킹 (이메일 형태가 아니면 placeholder)
    - 그 외 문자열: 안에 포함된 이메일 주소만 마스킹
    """
    if isinstance(data, dict):
        return {key: _mask_label(key, value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [mask_sensitive_data(item) for item in data]
    if isinstance(data, str):
        return mask_email(data)
    return data


# =============================================================================
# 포매터
# =============================================================================


class ECSJsonFormatter(logging.Formatter):
    """Elastic Common Schema (ECS) 기반 JSON 포매터."""

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = "local",
    ):
        super().__init__()
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "message": mask_email(record.getMessage()),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "ecs.version": ECS_VERSION,
            "service.name": self.service_name,
            "service.version": self.service_version,
            "service.environment": self.environment,
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_obj["error.type"] = exc_type.__name__ if exc_type else None
            log_obj["error.message"] = mask_email(str(exc_value)) if exc_value else None
            log_obj["error.stack_trace"] = mask_email(self.formatException(record.exc_info))

        labels = {
            key: value
            for key, value in record.__dict__.items()
            if key not in EXCLUDED_LOG_RECORD_ATTRS
        }
        if labels:
            log_obj["labels"] = mask_sensitive_data(labels)

        return json.dumps(log_obj, ensure_ascii=False, default=str)


class MaskingTextFormatter(logging.Formatter):
    """로컬 개발용 한 줄 포맷 (이메일 마스킹)."""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        return mask_email(super().format(record))


# =============================================================================
# 로깅 설정
# =============================================================================


def configure_logging(
    log_level: str = "INFO",
    json_format: bool = True,
    environment: str = "local",
    service_name: str = SERVICE_NAME,
    service_version: str = SERVICE_VERSION,
) -> None:
    """애플리케이션 로깅 설정.

    Args:
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        json_format: ECS JSON 포맷 사용 여부
        environment: service.environment 값
        service_name: 서비스 이름
        service_version: 서비스 버전
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # 기존 핸들러 제거
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(
        ECSJsonFormatter(service_name, service_version, environment)
        if json_format
        else MaskingTextFormatter()
    )
    root_logger.addHandler(handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
