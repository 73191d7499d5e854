"""Domain Error.

서브클래스 계층 대신 ``kind`` 태그로 오류 종류를 구분합니다.
호출자는 ``isinstance`` 가 아닌 ``error.kind`` 로 분기합니다.

Example:
    >>> try:
    ...     UserEmail("invalid")
    ... except DomainError as e:
    ...     if e.kind is ErrorKind.INVALID_FORMAT:
    ...         ...
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """도메인 오류 종류."""

    EMPTY_VALUE = "empty_value"
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_ENUM = "invalid_enum"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    STORAGE_FAILURE = "storage_failure"


VALIDATION_KINDS = frozenset(
    {
        ErrorKind.EMPTY_VALUE,
        ErrorKind.INVALID_LENGTH,
        ErrorKind.INVALID_FORMAT,
        ErrorKind.INVALID_ENUM,
    }
)


class DomainError(Exception):
    """kind 태그를 가진 단일 도메인 예외.

    Attributes:
        kind: 오류 종류
        message: 사람이 읽을 수 있는 메시지
        field: 오류가 발생한 필드 (값 객체 검증 오류)
        details: 구조화된 추가 정보 (min, max, actual, user_id 등)
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.field = field
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, message={self.message!r})"

    @property
    def is_validation_error(self) -> bool:
        return self.kind in VALIDATION_KINDS

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @classmethod
    def empty_value(cls, field: str) -> "DomainError":
        """필수 문자열이 비어 있거나 공백뿐인 경우."""
        return cls(ErrorKind.EMPTY_VALUE, f"{field} cannot be empty", field=field)

    @classmethod
    def invalid_length(
        cls,
        field: str,
        min_length: int,
        max_length: int,
        actual_length: int,
    ) -> "DomainError":
        """길이 제한 위반."""
        return cls(
            ErrorKind.INVALID_LENGTH,
            f"{field} length must be between {min_length} and {max_length} characters. "
            f"Current length: {actual_length}",
            field=field,
            details={"min": min_length, "max": max_length, "actual": actual_length},
        )

    @classmethod
    def invalid_format(cls, field: str, value: Any) -> "DomainError":
        """형식 위반 (이메일 등)."""
        return cls(
            ErrorKind.INVALID_FORMAT,
            f"Invalid {field.lower()} format: '{value}'",
            field=field,
            details={"value": value},
        )

    @classmethod
    def invalid_enum(cls, field: str, value: Any, allowed: list[str]) -> "DomainError":
        """허용되지 않은 열거값."""
        return cls(
            ErrorKind.INVALID_ENUM,
            f"Invalid {field.lower()}: {value!r}. Allowed: {', '.join(allowed)}",
            field=field,
            details={"value": value, "allowed": allowed},
        )

    # -------------------------------------------------------------------------
    # Lookup / Uniqueness
    # -------------------------------------------------------------------------

    @classmethod
    def not_found(cls, user_id: str) -> "DomainError":
        return cls(
            ErrorKind.NOT_FOUND,
            f"User with ID '{user_id}' not found",
            details={"user_id": user_id},
        )

    @classmethod
    def already_exists(cls, email: str) -> "DomainError":
        return cls(
            ErrorKind.ALREADY_EXISTS,
            f"User with email '{email}' already exists",
            field="email",
            details={"email": email},
        )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    @classmethod
    def storage_failure(cls, operation: str, reason: str) -> "DomainError":
        """저장소 협력자가 보고한 실패."""
        return cls(
            ErrorKind.STORAGE_FAILURE,
            f"Storage failure during {operation}: {reason}",
            details={"operation": operation, "reason": reason},
        )
