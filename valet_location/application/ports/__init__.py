"""Application Ports.

OS 위치/권한/설정 기능과 메트릭 백엔드에 대한 추상화.
Infrastructure Layer 또는 호스트 앱에서 구현합니다.
"""

from valet_location.application.ports.metrics import LocationMetricsPort, NoOpLocationMetrics
from valet_location.application.ports.permission_provider import PermissionProvider
from valet_location.application.ports.position_provider import (
    PositionFix,
    PositionProvider,
    PositionProviderError,
    PositionUpdate,
    ProviderErrorCode,
)
from valet_location.application.ports.settings_launcher import SettingsLauncher

__all__ = [
    "LocationMetricsPort",
    "NoOpLocationMetrics",
    "PermissionProvider",
    "PositionFix",
    "PositionProvider",
    "PositionProviderError",
    "PositionUpdate",
    "ProviderErrorCode",
    "SettingsLauncher",
]
