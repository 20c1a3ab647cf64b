"""Location Service - 위치 서브시스템 공개 인터페이스.

요청 생성 화면 등 앱의 나머지 부분은 이 객체만 사용합니다.
인스턴스마다 single-flight 상태와 구독 목록을 따로 가지므로,
프로세스 전역 싱글톤이 아니라 setup.dependencies에서 조립해 주입합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from valet_location.application.acquisition.dto import AcquisitionOptions

if TYPE_CHECKING:
    from valet_location.application.acquisition.commands import GetCurrentLocationCommand
    from valet_location.application.acquisition.services import PermissionGate, StrategyRacer
    from valet_location.application.tracking import (
        ContinuousWatcher,
        ErrorCallback,
        LocationCallback,
    )
    from valet_location.domain.value_objects import Location, PermissionState, WatchHandle

logger = logging.getLogger(__name__)


class LocationService:
    """위치 획득 서비스 Facade."""

    def __init__(
        self,
        get_current_location: "GetCurrentLocationCommand",
        permission_gate: "PermissionGate",
        watcher: "ContinuousWatcher",
        racer: "StrategyRacer",
        default_options: AcquisitionOptions | None = None,
    ) -> None:
        self._get_current_location = get_current_location
        self._gate = permission_gate
        self._watcher = watcher
        self._racer = racer
        self._defaults = default_options or AcquisitionOptions()

    @property
    def default_options(self) -> AcquisitionOptions:
        return self._defaults

    async def get_current_location(
        self,
        options: AcquisitionOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> "Location":
        """현재 위치를 한 번 획득합니다.

        Args:
            options: 기본값 위에 덮어쓸 옵션 (객체 또는 매핑)
            **overrides: 개별 필드 덮어쓰기

        Returns:
            Location

        Raises:
            LocationError: 분류된 실패
        """
        merged = self._defaults.merge(options, **overrides)
        return await self._get_current_location.execute(merged)

    def watch_position(
        self,
        on_location: "LocationCallback",
        on_error: "ErrorCallback",
        high_accuracy: bool = False,
    ) -> "WatchHandle":
        """연속 위치 구독을 시작합니다."""
        return self._watcher.watch(on_location, on_error, high_accuracy=high_accuracy)

    def clear_watch(self, handle: "WatchHandle") -> None:
        """구독을 해제합니다 (멱등)."""
        self._watcher.cancel(handle)

    def stop_observing(self) -> None:
        """모든 구독을 해제합니다."""
        self._watcher.cancel_all()

    async def request_background_permission(self) -> bool:
        """백그라운드 위치 권한을 요청합니다.

        포그라운드 권한이 허용된 뒤에만 의미가 있습니다.
        """
        return await self._gate.request_background()

    async def get_permission_status(self) -> "PermissionState":
        """현재 권한/위치 서비스 상태를 조회합니다."""
        return await self._gate.status()

    async def aclose(self) -> None:
        """구독을 모두 해제하고 버려진 제공자 호출이 끝나길 기다립니다."""
        await self._watcher.aclose()
        await self._racer.drain()
        logger.info("location_service_closed")
