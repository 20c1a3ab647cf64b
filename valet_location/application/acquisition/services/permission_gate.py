"""Permission Gate.

위치 권한과 시스템 위치 서비스 상태를 확인합니다.

순서 (OS 요구사항):
    1. 포그라운드 권한 (FINE → 거부 시 COARSE)
    2. 위치 서비스 활성화 여부 (빠른 측위 프로브)
    3. 백그라운드 권한 (포그라운드 확인 후에만, 일회성 획득의 전제조건 아님)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from valet_location.application.ports.position_provider import (
    PositionProviderError,
    ProviderErrorCode,
)
from valet_location.domain.enums import PermissionKind
from valet_location.domain.exceptions import PermissionDeniedError, ServicesDisabledError
from valet_location.domain.value_objects import PermissionState

if TYPE_CHECKING:
    from valet_location.application.ports import (
        PermissionProvider,
        PositionProvider,
        SettingsLauncher,
    )

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT_MS = 1000
# 백그라운드 위치 권한이 도입된 API 레벨 (Android 10)
BACKGROUND_PERMISSION_MIN_API_LEVEL = 29


class PermissionGate:
    """위치 권한 게이트.

    서비스 인스턴스마다 하나씩 두며, 포그라운드 허용 여부를 기억해
    백그라운드 권한 요청의 선행 조건으로 사용합니다.
    """

    def __init__(
        self,
        permission_provider: "PermissionProvider",
        position_provider: "PositionProvider",
        settings_launcher: "SettingsLauncher | None" = None,
        probe_timeout_ms: int = DEFAULT_PROBE_TIMEOUT_MS,
        prompt_settings_when_disabled: bool = True,
        offer_settings_on_background_denial: bool = True,
        platform_api_level: int | None = None,
        background_min_api_level: int = BACKGROUND_PERMISSION_MIN_API_LEVEL,
    ) -> None:
        self._permissions = permission_provider
        self._positions = position_provider
        self._settings = settings_launcher
        self._probe_timeout_ms = probe_timeout_ms
        self._prompt_settings = prompt_settings_when_disabled
        self._offer_settings_on_background_denial = offer_settings_on_background_denial
        self._api_level = platform_api_level
        self._background_min_api_level = background_min_api_level
        self._foreground_granted = False

    @property
    def foreground_granted(self) -> bool:
        """이 인스턴스에서 포그라운드 권한이 확인된 적 있는지."""
        return self._foreground_granted

    async def ensure(self, needs_background: bool = False) -> None:
        """일회성 획득 전 권한/서비스 상태를 보장합니다.

        Args:
            needs_background: 포그라운드 확인 후 백그라운드 권한도 요청할지

        Raises:
            PermissionDeniedError: FINE/COARSE 모두 거부됨
            ServicesDisabledError: 안내 후에도 위치 서비스가 꺼져 있음
        """
        if not await self._request_foreground():
            raise PermissionDeniedError()

        if not await self._services_enabled():
            logger.warning("location_services_disabled")
            if self._settings is not None and self._prompt_settings:
                await self._settings.open_location_settings()
                if not await self._services_enabled():
                    raise ServicesDisabledError()
            else:
                raise ServicesDisabledError()

        if needs_background:
            granted = await self.request_background()
            logger.info("background_permission_checked", extra={"granted": granted})

    async def request_background(self) -> bool:
        """백그라운드 위치 권한을 요청합니다.

        포그라운드 권한이 먼저 있어야 하며, 없으면 요청하지 않고 False를 반환합니다.

        Returns:
            허용 여부
        """
        if not self._background_required():
            return True

        if not self._foreground_granted and not await self._check_foreground():
            logger.error("background_permission_without_foreground")
            return False

        if await self._permissions.check(PermissionKind.BACKGROUND_LOCATION):
            return True

        if await self._permissions.request(PermissionKind.BACKGROUND_LOCATION):
            logger.info("background_permission_granted")
            return True

        logger.warning("background_permission_denied")
        if self._settings is not None and self._offer_settings_on_background_denial:
            await self._settings.open_app_settings()
        return False

    async def status(self) -> PermissionState:
        """현재 권한 상태 스냅샷을 조회합니다 (다이얼로그 없음)."""
        foreground = await self._check_foreground()
        services_enabled = await self._services_enabled()

        if not self._background_required():
            background = foreground
        else:
            background = await self._permissions.check(PermissionKind.BACKGROUND_LOCATION)

        return PermissionState(
            foreground_granted=foreground,
            background_granted=background,
            services_enabled=services_enabled,
        )

    async def _check_foreground(self) -> bool:
        for kind in (PermissionKind.FINE_LOCATION, PermissionKind.COARSE_LOCATION):
            if await self._permissions.check(kind):
                self._foreground_granted = True
                return True
        self._foreground_granted = False
        return False

    async def _request_foreground(self) -> bool:
        for kind in (PermissionKind.FINE_LOCATION, PermissionKind.COARSE_LOCATION):
            if await self._permissions.check(kind) or await self._permissions.request(kind):
                logger.info("foreground_permission_granted", extra={"permission": kind.value})
                self._foreground_granted = True
                return True
            logger.info("foreground_permission_refused", extra={"permission": kind.value})

        logger.warning("foreground_permission_denied")
        self._foreground_granted = False
        return False

    async def _services_enabled(self) -> bool:
        """빠른 네트워크 측위로 위치 서비스 활성화 여부를 추정합니다.

        OS에 직접 조회 API가 없으므로 POSITION_UNAVAILABLE만 "꺼짐"으로 보고,
        그 외 에러(타임아웃 등)는 켜져 있는 것으로 간주합니다.
        """
        try:
            await self._positions.request_once(
                high_accuracy=False,
                timeout_ms=self._probe_timeout_ms,
                max_age_ms=0,
            )
        except PositionProviderError as e:
            return e.code != ProviderErrorCode.POSITION_UNAVAILABLE
        return True

    def _background_required(self) -> bool:
        return self._api_level is None or self._api_level >= self._background_min_api_level
