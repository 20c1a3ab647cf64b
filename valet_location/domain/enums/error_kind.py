"""ErrorKind Enum.

위치 획득 실패 분류 (닫힌 집합).

재시도 정책:
- PERMISSION_DENIED, SERVICES_DISABLED: 치명적 (사용자 조치 필요, 재시도 안 함)
- TIMEOUT, PROVIDER_ERROR: 재시도 가능 (일시적 신호/타이밍 문제)
- CONCURRENT_REQUEST_REJECTED: 호출자 오류 (부작용 없이 즉시 거부)
"""

from enum import Enum


class ErrorKind(str, Enum):
    """위치 획득 에러 종류."""

    PERMISSION_DENIED = "permission_denied"
    """위치 권한 거부 - 사용자가 다시 허용해야 함."""

    SERVICES_DISABLED = "services_disabled"
    """시스템 위치 서비스 꺼짐 - 사용자가 켜야 함."""

    TIMEOUT = "timeout"
    """제한 시간 내 위치 미수신."""

    CONCURRENT_REQUEST_REJECTED = "concurrent_request_rejected"
    """이미 진행 중인 요청이 있음."""

    PROVIDER_ERROR = "provider_error"
    """기타 위치 제공자 오류."""

    @property
    def is_fatal(self) -> bool:
        """재시도 없이 즉시 전파해야 하는 종류인지."""
        return self in (ErrorKind.PERMISSION_DENIED, ErrorKind.SERVICES_DISABLED)

    @property
    def is_retryable(self) -> bool:
        """로컬 재시도 대상인지."""
        return self in (ErrorKind.TIMEOUT, ErrorKind.PROVIDER_ERROR)
