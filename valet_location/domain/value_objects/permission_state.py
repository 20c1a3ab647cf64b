"""PermissionState Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionState:
    """위치 권한 스냅샷.

    획득 시도마다 새로 조회하며, 앱 재시작 간에 캐시하지 않습니다.
    """

    foreground_granted: bool
    background_granted: bool
    services_enabled: bool

    @property
    def can_acquire(self) -> bool:
        """포그라운드 일회성 획득이 가능한 상태인지."""
        return self.foreground_granted and self.services_enabled
