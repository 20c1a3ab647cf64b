"""Location Domain Layer."""

from valet_location.domain.enums import ErrorKind, LocationStrategy, PermissionKind
from valet_location.domain.value_objects import (
    FailurePrompt,
    Location,
    PermissionState,
    WatchHandle,
)

__all__ = [
    "ErrorKind",
    "FailurePrompt",
    "Location",
    "LocationStrategy",
    "PermissionKind",
    "PermissionState",
    "WatchHandle",
]
