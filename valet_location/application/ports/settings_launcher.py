"""Settings Launcher Port."""

from __future__ import annotations

from typing import Protocol


class SettingsLauncher(Protocol):
    """시스템 설정 화면 이동 포트.

    사용자가 안내를 닫거나 설정에서 돌아오면 반환합니다.
    """

    async def open_location_settings(self) -> None:
        """위치 서비스 설정 화면을 엽니다."""
        ...

    async def open_app_settings(self) -> None:
        """앱 권한 설정 화면을 엽니다."""
        ...
