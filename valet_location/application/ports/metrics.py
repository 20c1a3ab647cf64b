"""Metrics Port - 위치 획득 관측 인터페이스.

경주/재시도 로직은 이 Port만 호출하고,
실제 수집(Prometheus 등)은 Infrastructure에서 제공합니다.
테스트에서는 NoOp 또는 Mock으로 교체합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class LocationMetricsPort(ABC):
    """위치 획득 메트릭 Port."""

    @abstractmethod
    def track_strategy(self, strategy: str, outcome: str, duration: float) -> None:
        """전략별 제공자 응답 기록.

        Args:
            strategy: coarse / precise
            outcome: success / error / discarded
            duration: 요청 시작부터 응답까지 (초)
        """
        raise NotImplementedError

    @abstractmethod
    def track_race(self, outcome: str, duration: float) -> None:
        """경주 정착 기록.

        Args:
            outcome: early_accept / both_complete / deadline / rejected
            duration: 경주 시작부터 정착까지 (초)
        """
        raise NotImplementedError

    @abstractmethod
    def track_acquisition(self, status: str, duration: float) -> None:
        """일회성 획득 최종 결과 기록.

        Args:
            status: success 또는 ErrorKind 값
            duration: 호출부터 정착까지 (초)
        """
        raise NotImplementedError

    # === 선택적 메서드 (기본 NoOp 구현) ===

    def track_retry(self, error_kind: str) -> None:
        """재시도 예약 기록."""
        pass

    def track_watch_event(self, event: str) -> None:
        """연속 구독 이벤트 기록 (location / error / started / cancelled / ended)."""
        pass


class NoOpLocationMetrics(LocationMetricsPort):
    """메트릭 비활성화 시 사용하는 기본 구현체."""

    def track_strategy(self, strategy: str, outcome: str, duration: float) -> None:
        pass

    def track_race(self, outcome: str, duration: float) -> None:
        pass

    def track_acquisition(self, status: str, duration: float) -> None:
        pass
