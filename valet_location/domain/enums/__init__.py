"""Domain Enums."""

from valet_location.domain.enums.error_kind import ErrorKind
from valet_location.domain.enums.location_strategy import LocationStrategy
from valet_location.domain.enums.permission_kind import PermissionKind

__all__ = ["ErrorKind", "LocationStrategy", "PermissionKind"]
