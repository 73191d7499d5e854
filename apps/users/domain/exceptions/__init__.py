"""Domain Exceptions."""

from apps.users.domain.exceptions.base import VALIDATION_KINDS, DomainError, ErrorKind

__all__ = ["DomainError", "ErrorKind", "VALIDATION_KINDS"]
