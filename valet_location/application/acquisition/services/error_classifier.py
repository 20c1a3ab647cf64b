"""제공자 에러 → 도메인 에러 분류."""

from __future__ import annotations

from valet_location.application.ports.position_provider import (
    PositionProviderError,
    ProviderErrorCode,
)
from valet_location.domain.enums import ErrorKind
from valet_location.domain.exceptions import LocationError, error_for_kind

_KIND_BY_CODE: dict[ProviderErrorCode, ErrorKind] = {
    ProviderErrorCode.PERMISSION_DENIED: ErrorKind.PERMISSION_DENIED,
    # 위치 서비스가 꺼져 있으면 OS는 POSITION_UNAVAILABLE을 돌려준다
    ProviderErrorCode.POSITION_UNAVAILABLE: ErrorKind.SERVICES_DISABLED,
    ProviderErrorCode.TIMEOUT: ErrorKind.TIMEOUT,
}


def classify_provider_error(error: PositionProviderError) -> LocationError:
    """제공자 에러를 ErrorKind에 맞는 LocationError로 변환합니다."""
    kind = _KIND_BY_CODE.get(error.code, ErrorKind.PROVIDER_ERROR)
    return error_for_kind(kind, error.message)
