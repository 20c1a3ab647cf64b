"""Retry Orchestrator - 경주 재시도 정책.

상태 머신:
    Attempt(n) → 경주 실행
    - 성공: Resolved
    - 치명적 에러 (PERMISSION_DENIED, SERVICES_DISABLED): 즉시 전파
    - 재시도 가능 에러 (TIMEOUT, PROVIDER_ERROR):
        n < retry_count 이면 고정 backoff 후 Attempt(n+1), 아니면 마지막 에러 전파

Single-flight:
    서비스 인스턴스당 일회성 획득은 하나만 진행됩니다.
    단일 이벤트 루프에서만 접근하므로 락 없이 인스턴스 필드로 관리합니다.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, AsyncIterator, Awaitable, Callable

from valet_location.application.ports.metrics import LocationMetricsPort, NoOpLocationMetrics
from valet_location.domain.exceptions import ConcurrentRequestRejectedError, LocationError

if TYPE_CHECKING:
    from valet_location.application.acquisition.dto import AcquisitionOptions
    from valet_location.domain.value_objects import Location

logger = logging.getLogger(__name__)

Attempt = Callable[["AcquisitionOptions"], Awaitable["Location"]]


@dataclass(frozen=True)
class RetryPolicy:
    """재시도 정책 설정."""

    backoff_ms: int = 1000

    @property
    def backoff_seconds(self) -> float:
        return self.backoff_ms / 1000


class RetryOrchestrator:
    """경주 재시도 실행기 + single-flight 가드."""

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        metrics: LocationMetricsPort | None = None,
    ) -> None:
        """초기화.

        Args:
            policy: 재시도 정책 (None이면 기본값)
            metrics: 메트릭 Port (None이면 NoOp)
        """
        self._policy = policy or RetryPolicy()
        self._metrics = metrics or NoOpLocationMetrics()
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        """일회성 획득이 진행 중인지."""
        return self._in_flight

    @asynccontextmanager
    async def single_flight(self) -> AsyncIterator[None]:
        """진행 중 플래그를 확인하고 설정합니다.

        플래그는 성공/실패/취소 어떤 경로로 빠져나가도 해제됩니다.

        Raises:
            ConcurrentRequestRejectedError: 이미 진행 중인 요청이 있음
        """
        if self._in_flight:
            logger.warning("location_request_rejected_in_flight")
            raise ConcurrentRequestRejectedError()

        self._in_flight = True
        try:
            yield
        finally:
            self._in_flight = False

    async def run(self, attempt: Attempt, options: "AcquisitionOptions") -> "Location":
        """재시도 정책과 함께 경주를 실행합니다.

        Args:
            attempt: 경주 함수 (보통 StrategyRacer.race)
            options: retry_count 포함 획득 옵션

        Returns:
            Location

        Raises:
            LocationError: 치명적 에러 또는 재시도 소진 시 마지막 에러
        """
        total = options.retry_count + 1

        for n in range(total):
            try:
                logger.info("location_attempt_started", extra={"attempt": n + 1, "total": total})
                return await attempt(options)

            except LocationError as e:
                if not e.is_retryable:
                    logger.warning(
                        "location_attempt_not_retryable",
                        extra={"attempt": n + 1, "error_kind": e.kind.value, "error": e.message},
                    )
                    raise

                if n >= options.retry_count:
                    logger.error(
                        "location_retry_exhausted",
                        extra={"attempts": n + 1, "error_kind": e.kind.value, "error": e.message},
                    )
                    raise

                self._metrics.track_retry(e.kind.value)
                logger.info(
                    "location_retry_scheduled",
                    extra={
                        "attempt": n + 1,
                        "retry_count": options.retry_count,
                        "delay_seconds": self._policy.backoff_seconds,
                        "error_kind": e.kind.value,
                    },
                )
                await asyncio.sleep(self._policy.backoff_seconds)

        raise RuntimeError("Unexpected retry state")
