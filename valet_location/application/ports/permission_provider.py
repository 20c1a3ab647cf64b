"""Permission Provider Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from valet_location.domain.enums import PermissionKind


class PermissionProvider(ABC):
    """OS 위치 권한 포트."""

    @abstractmethod
    async def check(self, kind: PermissionKind) -> bool:
        """권한이 이미 허용되었는지 확인합니다 (다이얼로그 없음)."""
        ...

    @abstractmethod
    async def request(self, kind: PermissionKind) -> bool:
        """권한을 요청합니다 (OS 다이얼로그를 띄울 수 있음).

        Returns:
            허용 여부
        """
        ...
