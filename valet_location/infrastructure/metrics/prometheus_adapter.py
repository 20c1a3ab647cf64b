"""Prometheus Metrics Adapter - LocationMetricsPort 구현.

Application Layer는 Prometheus를 직접 알지 않고 LocationMetricsPort만 사용합니다.
메트릭 기록 실패는 로그만 남기고 위치 획득 흐름을 막지 않습니다.
"""

from __future__ import annotations

import logging

from valet_location.application.ports.metrics import LocationMetricsPort
from valet_location.infrastructure.metrics.metrics import (
    LOCATION_ACQUISITIONS_TOTAL,
    LOCATION_ACQUISITION_DURATION,
    LOCATION_RACE_DURATION,
    LOCATION_RACES_TOTAL,
    LOCATION_RETRIES_TOTAL,
    LOCATION_STRATEGY_DURATION,
    LOCATION_STRATEGY_RESULTS_TOTAL,
    LOCATION_WATCH_EVENTS_TOTAL,
    LOCATION_WATCHES_ACTIVE,
)

logger = logging.getLogger(__name__)


class PrometheusLocationMetrics(LocationMetricsPort):
    """Prometheus 메트릭 어댑터.

    사용 예시:
        metrics = PrometheusLocationMetrics()
        racer = StrategyRacer(provider, metrics=metrics)
    """

    def track_strategy(self, strategy: str, outcome: str, duration: float) -> None:
        """전략 응답 메트릭 기록."""
        try:
            LOCATION_STRATEGY_RESULTS_TOTAL.labels(strategy=strategy, outcome=outcome).inc()
            if outcome != "discarded":
                LOCATION_STRATEGY_DURATION.labels(strategy=strategy).observe(duration)
        except Exception as e:
            logger.warning(
                "metrics_track_strategy_failed",
                extra={"strategy": strategy, "error": str(e)},
            )

    def track_race(self, outcome: str, duration: float) -> None:
        """경주 정착 메트릭 기록."""
        try:
            LOCATION_RACES_TOTAL.labels(outcome=outcome).inc()
            LOCATION_RACE_DURATION.labels(outcome=outcome).observe(duration)
        except Exception as e:
            logger.warning(
                "metrics_track_race_failed",
                extra={"outcome": outcome, "error": str(e)},
            )

    def track_acquisition(self, status: str, duration: float) -> None:
        """일회성 획득 메트릭 기록."""
        try:
            LOCATION_ACQUISITIONS_TOTAL.labels(status=status).inc()
            LOCATION_ACQUISITION_DURATION.labels(status=status).observe(duration)
        except Exception as e:
            logger.warning(
                "metrics_track_acquisition_failed",
                extra={"status": status, "error": str(e)},
            )

    def track_retry(self, error_kind: str) -> None:
        """재시도 메트릭 기록."""
        try:
            LOCATION_RETRIES_TOTAL.labels(error_kind=error_kind).inc()
        except Exception as e:
            logger.warning(
                "metrics_track_retry_failed",
                extra={"error_kind": error_kind, "error": str(e)},
            )

    def track_watch_event(self, event: str) -> None:
        """연속 구독 메트릭 기록."""
        try:
            LOCATION_WATCH_EVENTS_TOTAL.labels(event=event).inc()
            if event == "started":
                LOCATION_WATCHES_ACTIVE.inc()
            elif event in ("cancelled", "ended"):
                LOCATION_WATCHES_ACTIVE.dec()
        except Exception as e:
            logger.warning(
                "metrics_track_watch_event_failed",
                extra={"event": event, "error": str(e)},
            )
