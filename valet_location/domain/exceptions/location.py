"""Location 도메인 예외.

ErrorKind 하나당 예외 클래스 하나가 대응합니다.
호출자는 LocationError 하나만 잡고 kind로 분기해도 됩니다.
"""

from __future__ import annotations

from typing import ClassVar

from valet_location.domain.enums import ErrorKind
from valet_location.domain.exceptions.base import DomainError
from valet_location.domain.value_objects import FailurePrompt


class LocationError(DomainError):
    """위치 획득 실패."""

    kind: ClassVar[ErrorKind] = ErrorKind.PROVIDER_ERROR
    default_message: ClassVar[str] = "Location provider error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.prompt: FailurePrompt | None = None

    @property
    def is_fatal(self) -> bool:
        return self.kind.is_fatal

    @property
    def is_retryable(self) -> bool:
        return self.kind.is_retryable


class PermissionDeniedError(LocationError):
    """위치 권한 거부."""

    kind = ErrorKind.PERMISSION_DENIED
    default_message = "Location permission denied"


class ServicesDisabledError(LocationError):
    """시스템 위치 서비스 꺼짐."""

    kind = ErrorKind.SERVICES_DISABLED
    default_message = "Location services are disabled"


class LocationTimeoutError(LocationError):
    """제한 시간 초과."""

    kind = ErrorKind.TIMEOUT
    default_message = "Location request timed out"


class ConcurrentRequestRejectedError(LocationError):
    """이미 진행 중인 일회성 요청이 있음."""

    kind = ErrorKind.CONCURRENT_REQUEST_REJECTED
    default_message = "Location request already in progress"


class LocationProviderError(LocationError):
    """기타 위치 제공자 오류."""

    kind = ErrorKind.PROVIDER_ERROR


_ERRORS_BY_KIND: dict[ErrorKind, type[LocationError]] = {
    cls.kind: cls
    for cls in (
        PermissionDeniedError,
        ServicesDisabledError,
        LocationTimeoutError,
        ConcurrentRequestRejectedError,
        LocationProviderError,
    )
}


def error_for_kind(kind: ErrorKind, message: str | None = None) -> LocationError:
    """ErrorKind에 대응하는 예외 인스턴스를 생성합니다."""
    return _ERRORS_BY_KIND[kind](message)
