"""DomainError → HTTP status 변환."""

from __future__ import annotations

from fastapi import status

from apps.users.domain.exceptions import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.STORAGE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def translate_domain_error(error: DomainError) -> int:
    """kind 에 대응하는 HTTP status code. 검증 오류는 모두 400."""
    if error.is_validation_error:
        return status.HTTP_400_BAD_REQUEST
    return STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
