"""Domain Value Objects."""

from valet_location.domain.value_objects.failure_prompt import FailurePrompt
from valet_location.domain.value_objects.location import Location
from valet_location.domain.value_objects.permission_state import PermissionState
from valet_location.domain.value_objects.watch_handle import WatchHandle

__all__ = ["FailurePrompt", "Location", "PermissionState", "WatchHandle"]
