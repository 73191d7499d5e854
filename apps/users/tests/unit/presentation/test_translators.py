"""DomainError → HTTP status 변환 테스트."""

from apps.users.domain.exceptions import DomainError
from apps.users.presentation.http.errors import translate_domain_error


class TestTranslateDomainError:
    """kind 별 HTTP status 테스트"""

    def test_validation_errors_are_400(self) -> None:
        errors = [
            DomainError.empty_value("Name"),
            DomainError.invalid_length("Name", 2, 50, 1),
            DomainError.invalid_format("Email", "x"),
            DomainError.invalid_enum("State", "X", ["Active"]),
        ]
        assert [translate_domain_error(e) for e in errors] == [400, 400, 400, 400]

    def test_not_found_is_404(self) -> None:
        assert translate_domain_error(DomainError.not_found("user-1")) == 404

    def test_already_exists_is_409(self) -> None:
        assert translate_domain_error(DomainError.already_exists("juan@example.com")) == 409

    def test_storage_failure_is_503(self) -> None:
        assert translate_domain_error(DomainError.storage_failure("save", "boom")) == 503
