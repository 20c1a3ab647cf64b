"""Metrics/권한 어댑터 테스트."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from prometheus_client import REGISTRY

from valet_location.application.ports import NoOpLocationMetrics
from valet_location.domain.enums import PermissionKind
from valet_location.infrastructure.metrics import PrometheusLocationMetrics
from valet_location.infrastructure.permissions import UnrestrictedPermissionProvider
from valet_location.setup.config import Settings
from valet_location.setup.dependencies import get_metrics


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestPrometheusLocationMetrics:
    """PrometheusLocationMetrics 테스트."""

    def test_track_race(self) -> None:
        """경주 결과 카운트."""
        metrics = PrometheusLocationMetrics()
        before = _sample("location_races_total", {"outcome": "early_accept"})

        metrics.track_race("early_accept", 0.3)

        assert _sample("location_races_total", {"outcome": "early_accept"}) == before + 1

    def test_track_strategy_discarded_skips_duration(self) -> None:
        """discarded 응답은 소요 시간을 기록하지 않음."""
        metrics = PrometheusLocationMetrics()
        count = "location_strategy_duration_seconds_count"
        before = _sample(count, {"strategy": "precise"})
        discarded_before = _sample(
            "location_strategy_results_total", {"strategy": "precise", "outcome": "discarded"}
        )

        metrics.track_strategy("precise", "discarded", 4.0)

        assert _sample(count, {"strategy": "precise"}) == before
        assert (
            _sample(
                "location_strategy_results_total",
                {"strategy": "precise", "outcome": "discarded"},
            )
            == discarded_before + 1
        )

    def test_track_acquisition_and_retry(self) -> None:
        """획득/재시도 카운트."""
        metrics = PrometheusLocationMetrics()
        acquired = _sample("location_acquisitions_total", {"status": "timeout"})
        retried = _sample("location_retries_total", {"error_kind": "timeout"})

        metrics.track_retry("timeout")
        metrics.track_acquisition("timeout", 21.0)

        assert _sample("location_acquisitions_total", {"status": "timeout"}) == acquired + 1
        assert _sample("location_retries_total", {"error_kind": "timeout"}) == retried + 1

    def test_active_watches_gauge(self) -> None:
        """started/cancelled/ended에 따라 활성 구독 수 증감."""
        metrics = PrometheusLocationMetrics()
        before = _sample("location_watches_active")

        metrics.track_watch_event("started")
        metrics.track_watch_event("started")
        metrics.track_watch_event("location")
        assert _sample("location_watches_active") == before + 2

        metrics.track_watch_event("cancelled")
        metrics.track_watch_event("ended")
        assert _sample("location_watches_active") == before

    def test_failure_does_not_raise(self) -> None:
        """메트릭 기록 실패는 삼킴."""
        metrics = PrometheusLocationMetrics()

        with patch(
            "valet_location.infrastructure.metrics.prometheus_adapter.LOCATION_RACES_TOTAL"
        ) as counter:
            counter.labels.side_effect = ValueError("bad label")
            metrics.track_race("deadline", 1.0)


class TestGetMetrics:
    """설정 기반 어댑터 선택."""

    def test_disabled_returns_noop(self) -> None:
        assert isinstance(get_metrics(Settings(metrics_enabled=False)), NoOpLocationMetrics)

    def test_enabled_returns_prometheus(self) -> None:
        assert isinstance(get_metrics(Settings(metrics_enabled=True)), PrometheusLocationMetrics)


class TestUnrestrictedPermissionProvider:
    """UnrestrictedPermissionProvider 테스트."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", list(PermissionKind))
    async def test_always_granted(self, kind: PermissionKind) -> None:
        """모든 권한 허용."""
        provider = UnrestrictedPermissionProvider()

        assert await provider.check(kind) is True
        assert await provider.request(kind) is True
