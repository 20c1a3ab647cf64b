"""Unrestricted Permission Provider.

런타임 위치 권한 모델이 없는 플랫폼용 어댑터.
모든 권한을 허용된 것으로 보고하며 다이얼로그를 띄우지 않습니다.
"""

from __future__ import annotations

from valet_location.application.ports.permission_provider import PermissionProvider
from valet_location.domain.enums import PermissionKind


class UnrestrictedPermissionProvider(PermissionProvider):
    """항상 허용하는 권한 제공자."""

    async def check(self, kind: PermissionKind) -> bool:
        return True

    async def request(self, kind: PermissionKind) -> bool:
        return True
