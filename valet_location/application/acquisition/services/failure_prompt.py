"""실패 안내 문구 생성."""

from __future__ import annotations

from valet_location.domain.enums import ErrorKind
from valet_location.domain.value_objects import FailurePrompt

_PROMPTS: dict[ErrorKind, FailurePrompt] = {
    ErrorKind.PERMISSION_DENIED: FailurePrompt(
        title="Location Unavailable",
        message="Please grant location permission in settings.",
        offer_settings=True,
    ),
    ErrorKind.SERVICES_DISABLED: FailurePrompt(
        title="Location Services Disabled",
        message="Location services are disabled. Please enable GPS in your device settings.",
        offer_settings=True,
    ),
    ErrorKind.TIMEOUT: FailurePrompt(
        title="Location Error",
        message="Location signal is too weak. Please ensure a clear view of the sky and try again.",
    ),
    ErrorKind.PROVIDER_ERROR: FailurePrompt(
        title="Location Error",
        message="Unable to get location. Please check GPS settings and try again.",
    ),
}


def build_failure_prompt(kind: ErrorKind) -> FailurePrompt | None:
    """ErrorKind에 맞는 안내 문구를 반환합니다.

    호출자 오류(CONCURRENT_REQUEST_REJECTED)에는 안내가 없습니다.
    """
    return _PROMPTS.get(kind)
