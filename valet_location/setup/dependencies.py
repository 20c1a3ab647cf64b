"""Dependency Assembly.

호스트 앱이 제공한 OS 어댑터로 LocationService를 조립합니다.
서비스 인스턴스마다 single-flight 상태가 분리됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from valet_location.application.acquisition.commands import GetCurrentLocationCommand
from valet_location.application.acquisition.services import (
    PermissionGate,
    RetryOrchestrator,
    RetryPolicy,
    StrategyRacer,
)
from valet_location.application.location_service import LocationService
from valet_location.application.ports.metrics import LocationMetricsPort, NoOpLocationMetrics
from valet_location.application.tracking import ContinuousWatcher
from valet_location.setup.config import Settings, get_settings

if TYPE_CHECKING:
    from valet_location.application.ports import (
        PermissionProvider,
        PositionProvider,
        SettingsLauncher,
    )

logger = logging.getLogger(__name__)


def get_metrics(settings: Settings) -> LocationMetricsPort:
    """설정에 따라 메트릭 어댑터를 반환합니다."""
    if settings.metrics_enabled:
        from valet_location.infrastructure.metrics import PrometheusLocationMetrics

        logger.info("Prometheus location metrics enabled")
        return PrometheusLocationMetrics()
    return NoOpLocationMetrics()


def build_location_service(
    position_provider: "PositionProvider",
    permission_provider: "PermissionProvider",
    settings_launcher: "SettingsLauncher | None" = None,
    metrics: LocationMetricsPort | None = None,
    settings: Settings | None = None,
) -> LocationService:
    """LocationService를 조립합니다.

    Args:
        position_provider: OS 측위 어댑터
        permission_provider: OS 권한 어댑터
        settings_launcher: 설정 화면 이동 어댑터 (없으면 안내 없이 실패)
        metrics: 메트릭 어댑터 (None이면 설정에 따라 선택)
        settings: 설정 (None이면 환경 변수 기반 싱글톤)

    Returns:
        LocationService
    """
    settings = settings or get_settings()
    metrics = metrics or get_metrics(settings)

    gate = PermissionGate(
        permission_provider=permission_provider,
        position_provider=position_provider,
        settings_launcher=settings_launcher,
        probe_timeout_ms=settings.services_probe_timeout_ms,
        prompt_settings_when_disabled=settings.prompt_settings_when_disabled,
        offer_settings_on_background_denial=settings.offer_settings_on_background_denial,
        platform_api_level=settings.platform_api_level,
        background_min_api_level=settings.background_permission_min_api_level,
    )
    racer = StrategyRacer(
        position_provider,
        metrics=metrics,
        coarse_timeout_ms=settings.coarse_timeout_ms,
    )
    orchestrator = RetryOrchestrator(
        policy=RetryPolicy(backoff_ms=settings.retry_backoff_ms),
        metrics=metrics,
    )
    watcher = ContinuousWatcher(
        position_provider,
        metrics=metrics,
        distance_filter_m=settings.watch_distance_filter_m,
        interval_ms=settings.watch_interval_ms,
        fastest_interval_ms=settings.watch_fastest_interval_ms,
    )
    command = GetCurrentLocationCommand(
        permission_gate=gate,
        racer=racer,
        orchestrator=orchestrator,
        metrics=metrics,
    )
    return LocationService(
        get_current_location=command,
        permission_gate=gate,
        watcher=watcher,
        racer=racer,
        default_options=settings.default_options(),
    )
