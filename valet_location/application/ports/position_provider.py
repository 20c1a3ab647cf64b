"""Position Provider Port.

OS 측위 기능 추상화.
- 일회성 요청 (정확도 모드, 타임아웃, 캐시 허용 시간)
- 연속 구독 (거리/주기 필터)

콜백 기반 OS API는 구현체에서 단일 결과 코루틴과
취소 가능한 async 스트림으로 감싸서 제공합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import AsyncIterator, Union


class ProviderErrorCode(IntEnum):
    """OS 측위 에러 코드."""

    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3
    ACTIVITY_NULL = 4


class PositionProviderError(Exception):
    """OS 측위 실패."""

    def __init__(self, code: ProviderErrorCode, message: str = "") -> None:
        self.code = code
        self.message = message or code.name.lower()
        super().__init__(f"[{code.value}] {self.message}")


@dataclass(frozen=True)
class PositionFix:
    """제공자가 돌려준 원시 측위 결과."""

    latitude: float
    longitude: float
    accuracy: float | None = None
    timestamp: datetime | None = None


# 연속 구독 스트림 항목: 측위 결과 또는 (스트림을 끝내지 않는) 에러
PositionUpdate = Union[PositionFix, PositionProviderError]


class PositionProvider(ABC):
    """OS 측위 포트."""

    @abstractmethod
    async def request_once(
        self,
        high_accuracy: bool,
        timeout_ms: int,
        max_age_ms: int,
    ) -> PositionFix:
        """현재 위치를 한 번 요청합니다.

        Args:
            high_accuracy: True면 위성 기반, False면 네트워크 기반
            timeout_ms: 제공자 자체 타임아웃 (밀리초)
            max_age_ms: 허용할 캐시 위치의 최대 나이 (밀리초)

        Returns:
            PositionFix

        Raises:
            PositionProviderError: 측위 실패
        """
        ...

    @abstractmethod
    def watch(
        self,
        high_accuracy: bool,
        distance_filter_m: float,
        interval_ms: int,
        fastest_interval_ms: int,
    ) -> AsyncIterator[PositionUpdate]:
        """연속 위치 구독 스트림을 엽니다.

        스트림을 닫으면(aclose) OS 구독도 해제되어야 합니다.

        Args:
            high_accuracy: 정확도 모드
            distance_filter_m: 최소 이동 거리 (미터)
            interval_ms: 기본 보고 주기 (밀리초)
            fastest_interval_ms: 최소 보고 주기 (밀리초)
        """
        ...
