"""PermissionKind Enum."""

from enum import Enum


class PermissionKind(str, Enum):
    """OS 위치 권한 종류.

    FINE/COARSE는 포그라운드 권한, BACKGROUND는 백그라운드 권한입니다.
    백그라운드 권한은 포그라운드 권한이 확인된 뒤에만 요청할 수 있습니다.
    """

    FINE_LOCATION = "fine_location"
    COARSE_LOCATION = "coarse_location"
    BACKGROUND_LOCATION = "background_location"

    @property
    def is_foreground(self) -> bool:
        return self is not PermissionKind.BACKGROUND_LOCATION
