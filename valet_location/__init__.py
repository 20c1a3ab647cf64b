"""Valet Location - 디바이스 위치 획득 서브시스템."""

from valet_location.application.acquisition.dto import AcquisitionOptions
from valet_location.application.location_service import LocationService
from valet_location.domain.enums import ErrorKind
from valet_location.domain.exceptions import (
    ConcurrentRequestRejectedError,
    LocationError,
    LocationProviderError,
    LocationTimeoutError,
    PermissionDeniedError,
    ServicesDisabledError,
)
from valet_location.domain.value_objects import Location, PermissionState, WatchHandle

__all__ = [
    "AcquisitionOptions",
    "ConcurrentRequestRejectedError",
    "ErrorKind",
    "Location",
    "LocationError",
    "LocationProviderError",
    "LocationService",
    "LocationTimeoutError",
    "PermissionDeniedError",
    "PermissionState",
    "ServicesDisabledError",
    "WatchHandle",
]
